"""API client: request building, retry and sending for GET/POST/DELETE.

Every operation returns an explicit ``Optional`` result. ``None`` means the
call failed: a non-2xx status after retries, a transport error or a
timeout. Failures are logged and swallowed rather than raised, so callers
only observe the absence of a result.
"""

import logging
from typing import Optional

import httpx

from ..models import HttpMethod
from ..utils.http import (
    DefaultHttpClient,
    HttpRequestSender,
    RequestBuilder,
    RetryPolicy,
)

logger = logging.getLogger(__name__)


class ApiClient:
    """Compose :class:`RequestBuilder`, :class:`RetryPolicy` and
    :class:`HttpRequestSender` into one outbound pipeline.

    :param sender: Sender used for each attempt
    :type sender: HttpRequestSender
    :param retry_policy: Policy wrapping each call
    :type retry_policy: RetryPolicy
    :param request_builder: Builder producing a request per attempt
    :type request_builder: RequestBuilder
    """

    def __init__(
        self,
        sender: HttpRequestSender,
        retry_policy: RetryPolicy,
        request_builder: RequestBuilder,
    ):
        self._sender = sender
        self._retry_policy = retry_policy
        self._request_builder = request_builder

    async def get(self, path: str, token: Optional[str] = None) -> Optional[str]:
        """GET ``path``; return the body text on success, else None."""
        return await self._send(HttpMethod.GET, path, token=token)

    async def post(
        self,
        path: str,
        body: Optional[str] = None,
        timeout: Optional[float] = None,
        token: Optional[str] = None,
    ) -> Optional[str]:
        """POST ``body`` to ``path``; return the body text on success, else None."""
        return await self._send(HttpMethod.POST, path, body, timeout, token)

    async def post_raw(
        self,
        path: str,
        body: Optional[str] = None,
        timeout: Optional[float] = None,
        token: Optional[str] = None,
    ) -> Optional[httpx.Response]:
        """POST ``body`` to ``path`` and return the final response.

        The response is returned whatever its status; None is returned
        only when the call raised (transport error or timeout).
        """
        return await self._send_raw(HttpMethod.POST, path, body, timeout, token)

    async def delete(
        self, path: str, body: Optional[str] = None, token: Optional[str] = None
    ) -> Optional[str]:
        """DELETE ``path`` with an optional body; return the body text on success, else None."""
        return await self._send(HttpMethod.DELETE, path, body, token=token)

    async def _build_and_send(
        self,
        method: HttpMethod,
        path: str,
        body: Optional[str],
        token: Optional[str],
        timeout: Optional[float],
    ) -> httpx.Response:
        request = self._request_builder.build(method, path, body, token)
        return await self._sender.send(request, timeout)

    async def _execute(
        self,
        method: HttpMethod,
        path: str,
        body: Optional[str] = None,
        timeout: Optional[float] = None,
        token: Optional[str] = None,
    ) -> httpx.Response:
        return await self._retry_policy.execute(
            lambda: self._build_and_send(method, path, body, token, timeout)
        )

    async def _send(
        self,
        method: HttpMethod,
        path: str,
        body: Optional[str] = None,
        timeout: Optional[float] = None,
        token: Optional[str] = None,
    ) -> Optional[str]:
        response = await self._send_raw(method, path, body, timeout, token)
        if response is None:
            return None
        if not response.is_success:
            logger.warning(
                f"{method.value} {path} failed with status {response.status_code}"
            )
            return None
        return response.text

    async def _send_raw(
        self,
        method: HttpMethod,
        path: str,
        body: Optional[str] = None,
        timeout: Optional[float] = None,
        token: Optional[str] = None,
    ) -> Optional[httpx.Response]:
        try:
            return await self._execute(method, path, body, timeout, token)
        except Exception as e:
            logger.warning(f"{method.value} {path} failed: {type(e).__name__}: {e}")
            return None


def create_api_client(
    http_client: Optional[httpx.AsyncClient] = None,
    retry_policy: Optional[RetryPolicy] = None,
) -> ApiClient:
    """Wire an :class:`ApiClient` with the default collaborators.

    :param http_client: Optional ``httpx.AsyncClient`` to send through;
                        defaults to the shared managed client
    :type http_client: Optional[httpx.AsyncClient]
    :param retry_policy: Optional retry policy; defaults to 3 retries at 2/4/8s
    :type retry_policy: Optional[RetryPolicy]
    :return: Ready-to-use API client
    :rtype: ApiClient
    """
    return ApiClient(
        sender=HttpRequestSender(DefaultHttpClient(http_client)),
        retry_policy=retry_policy or RetryPolicy(),
        request_builder=RequestBuilder(),
    )
