"""Unit tests for request building."""

import json

from bearer_api_client.models import ApiModel, HttpMethod
from bearer_api_client.utils.http import JSON_CONTENT_TYPE, RequestBuilder, build_json_content
from bearer_api_client.utils.json import to_json


class Pedido(ApiModel):
    numero_pedido: str
    quantidade: int = 0


def test_body_and_token():
    payload = Pedido(numero_pedido="P-1", quantidade=3)
    body = to_json(payload)

    req = RequestBuilder().build(HttpMethod.POST, "https://api/x", body, "tok")

    assert req.method is HttpMethod.POST
    assert req.body == body.encode("utf-8")
    assert json.loads(req.body.decode("utf-8")) == {"numeroPedido": "P-1", "quantidade": 3}
    assert req.get_header("Content-Type") == JSON_CONTENT_TYPE
    assert req.get_header("Authorization") == "Bearer tok"


def test_null_token_has_no_authorization():
    req = RequestBuilder().build(HttpMethod.GET, "https://api/x", None, None)
    assert req.get_header("Authorization") is None


def test_empty_body_attaches_nothing():
    req = RequestBuilder().build(HttpMethod.DELETE, "https://api/x", "", "tok")
    assert req.body is None
    assert req.get_header("Content-Type") is None


def test_non_ascii_body_is_utf8():
    req = RequestBuilder().build(HttpMethod.POST, "https://api/x", '{"nome": "São Paulo"}')
    assert req.body == '{"nome": "São Paulo"}'.encode("utf-8")


def test_build_json_content_whitespace_is_no_body():
    assert build_json_content("  \n") is None
    assert build_json_content(None) is None
