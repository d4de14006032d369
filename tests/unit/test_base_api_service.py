"""Unit tests for the authenticated base service."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from bearer_api_client.auth import TokenService
from bearer_api_client.exceptions import AuthenticationError
from bearer_api_client.services import BaseApiService


def _token_service(*tokens):
    service = MagicMock(spec=TokenService)
    service.obtain_token = AsyncMock(side_effect=list(tokens))
    return service


@pytest.mark.asyncio
async def test_each_call_fetches_a_fresh_token(make_api_client):
    seen = []

    def handler(request):
        seen.append(request.headers.get("Authorization"))
        return httpx.Response(200, text="ok")

    tokens = _token_service("t1", "t2", "t3", "t4")
    service = BaseApiService(tokens, make_api_client(handler))

    assert await service.get("https://api/a") == "ok"
    assert await service.post("https://api/b", '{"x": 1}') == "ok"
    assert (await service.post_raw("https://api/c", "{}", 3.0)).status_code == 200
    assert await service.delete("https://api/d", None) == "ok"

    assert tokens.obtain_token.await_count == 4
    assert seen == ["Bearer t1", "Bearer t2", "Bearer t3", "Bearer t4"]


@pytest.mark.asyncio
async def test_retries_reuse_the_token_fetched_before_the_loop(make_api_client):
    seen = []
    responses = iter([httpx.Response(503), httpx.Response(503), httpx.Response(200, text="ok")])

    def handler(request):
        seen.append(request.headers.get("Authorization"))
        return next(responses)

    tokens = _token_service("only-token")
    service = BaseApiService(tokens, make_api_client(handler))

    assert await service.get("https://api/a") == "ok"
    assert tokens.obtain_token.await_count == 1
    assert seen == ["Bearer only-token"] * 3


@pytest.mark.asyncio
async def test_authentication_error_propagates(make_api_client):
    tokens = MagicMock(spec=TokenService)
    tokens.obtain_token = AsyncMock(side_effect=AuthenticationError("no token"))
    handler = MagicMock()
    service = BaseApiService(tokens, make_api_client(handler))

    with pytest.raises(AuthenticationError):
        await service.get("https://api/a")
    handler.assert_not_called()


@pytest.mark.asyncio
async def test_failure_after_token_is_reported_as_none(make_api_client):
    service = BaseApiService(_token_service("t"), make_api_client(lambda r: httpx.Response(500)))
    assert await service.post("https://api/a", "{}") is None


def test_requires_collaborators(make_api_client):
    with pytest.raises(ValueError):
        BaseApiService(None, make_api_client(lambda r: httpx.Response(200)))
    with pytest.raises(ValueError):
        BaseApiService(_token_service(), None)
