"""Unit tests for the typed, endpoint-keyed service."""

import json
from typing import List, Optional
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from bearer_api_client.auth import TokenService
from bearer_api_client.config import load_settings
from bearer_api_client.exceptions import ConfigurationError, SerializationError
from bearer_api_client.models import ApiModel
from bearer_api_client.services import DeserializedApiService, EndpointResolver


class Produto(ApiModel):
    codigo_produto: str = ""
    preco_unitario: float = 0.0
    descricao: Optional[str] = None


class ListaProdutos(ApiModel):
    itens: List[Produto] = []
    total: int = 0


ENDPOINTS = {
    "produtos": "/v1/Produtos",
    "externo": "https://outro.example.com/v2/itens",
}


def _token_service():
    service = MagicMock(spec=TokenService)
    service.obtain_token = AsyncMock(return_value="tok")
    return service


@pytest.fixture
def app_settings():
    return load_settings(endpoints=ENDPOINTS)


@pytest.fixture
def make_service(make_api_client, app_settings):
    def _make(handler, url_resolver=None):
        return DeserializedApiService(
            _token_service(), make_api_client(handler), app_settings, url_resolver
        )

    return _make


@pytest.mark.asyncio
async def test_get_as_decodes_response(make_service):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(
            200,
            json={"itens": [{"codigoProduto": "A1", "precoUnitario": 9.9}], "total": 1},
        )

    result = await make_service(handler).get_as("produtos", ListaProdutos)

    assert result.total == 1
    assert result.itens[0].codigo_produto == "A1"
    assert str(seen[0].url) == "https://api.example.com/v1/Produtos"
    assert seen[0].headers["Authorization"] == "Bearer tok"


@pytest.mark.asyncio
async def test_empty_body_yields_default_value(make_service):
    result = await make_service(lambda r: httpx.Response(200, text="")).get_as("produtos", ListaProdutos)
    assert result == ListaProdutos()


@pytest.mark.asyncio
async def test_whitespace_body_yields_default_value(make_service):
    result = await make_service(lambda r: httpx.Response(200, text="  \n")).get_as("produtos", list)
    assert result == []


@pytest.mark.asyncio
async def test_failed_request_yields_default_value(make_service):
    # Same result as an empty response.
    result = await make_service(lambda r: httpx.Response(404)).get_as("produtos", Produto)
    assert result == Produto()


@pytest.mark.asyncio
async def test_post_as_serializes_payload_in_camel_case(make_service):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(201, json={"codigoProduto": "B2", "precoUnitario": 1.5})

    payload = Produto(codigo_produto="B2", preco_unitario=1.5)
    result = await make_service(handler).post_as("produtos", payload, Produto)

    assert result == payload
    body = json.loads(seen[0].content)
    assert body == {"codigoProduto": "B2", "precoUnitario": 1.5}
    assert seen[0].method == "POST"


@pytest.mark.asyncio
async def test_delete_as_with_null_payload_sends_no_body(make_service):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"total": 0})

    result = await make_service(handler).delete_as("externo", None, ListaProdutos)

    assert result.total == 0
    assert seen[0].method == "DELETE"
    assert seen[0].content == b""
    assert str(seen[0].url) == "https://outro.example.com/v2/itens"


@pytest.mark.asyncio
async def test_injected_url_resolver(make_service):
    seen = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(200, json=[1, 2, 3])

    service = make_service(handler, url_resolver=lambda key: f"https://custom.example.com/{key}")

    assert await service.get_as("numeros", List[int]) == [1, 2, 3]
    assert seen == ["https://custom.example.com/numeros"]


@pytest.mark.asyncio
async def test_unknown_endpoint_key_raises(make_service):
    handler = MagicMock()
    with pytest.raises(ConfigurationError) as exc_info:
        await make_service(handler).get_as("nao-existe", Produto)
    assert exc_info.value.details == {"setting": "nao-existe"}
    handler.assert_not_called()


@pytest.mark.asyncio
async def test_malformed_body_raises_serialization_error(make_service):
    with pytest.raises(SerializationError):
        await make_service(lambda r: httpx.Response(200, text="{not json")).get_as("produtos", Produto)


def test_endpoint_resolver_joins_paths():
    resolver = EndpointResolver("https://api.example.com/", {"a": "v1/A", "b": "/v1/B"})
    assert resolver("a") == "https://api.example.com/v1/A"
    assert resolver("b") == "https://api.example.com/v1/B"


def test_endpoint_resolver_from_settings(app_settings):
    resolver = EndpointResolver.from_settings(app_settings)
    assert resolver("produtos") == "https://api.example.com/v1/Produtos"
