"""Authenticated API operations.

Each call fetches a fresh token and then delegates to the API client. The
token is obtained once per call, before the retry loop, so retried
attempts reuse it.
"""

from typing import Optional

import httpx

from ..auth import TokenService
from ..client import ApiClient


class BaseApiService:
    """GET/POST/DELETE with a bearer token attached.

    :param token_service: Service providing a token per call
    :type token_service: TokenService
    :param api_client: Client performing the requests
    :type api_client: ApiClient
    """

    def __init__(self, token_service: TokenService, api_client: ApiClient):
        if token_service is None:
            raise ValueError("token_service is required")
        if api_client is None:
            raise ValueError("api_client is required")
        self._token_service = token_service
        self._api_client = api_client

    async def _get_authentication_token(self) -> str:
        return await self._token_service.obtain_token()

    async def get(self, path: str) -> Optional[str]:
        token = await self._get_authentication_token()
        return await self._api_client.get(path, token)

    async def post(self, path: str, body: Optional[str] = None) -> Optional[str]:
        token = await self._get_authentication_token()
        return await self._api_client.post(path, body, token=token)

    async def post_raw(
        self, path: str, body: Optional[str] = None, timeout: Optional[float] = None
    ) -> Optional[httpx.Response]:
        token = await self._get_authentication_token()
        return await self._api_client.post_raw(path, body, timeout, token)

    async def delete(self, path: str, body: Optional[str] = None) -> Optional[str]:
        token = await self._get_authentication_token()
        return await self._api_client.delete(path, body, token)
