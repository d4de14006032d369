"""Transport seam and request sender.

``DefaultHttpClient`` is the opaque "send bytes over HTTP" capability,
backed by ``httpx.AsyncClient``. ``HttpRequestSender`` is the only
component that waits on I/O; it optionally bounds a send with a timeout
that cancels the in-flight call.
"""

import asyncio
import logging
from typing import Optional

import httpx

from ...exceptions import RequestTimeoutError
from ...models import OutboundRequest
from .client_manager import get_http_client

logger = logging.getLogger(__name__)


class DefaultHttpClient:
    """Send :class:`OutboundRequest` objects through an ``httpx.AsyncClient``.

    When no client is given, the shared client for the running event loop
    is fetched from the process-wide client manager on every send; its
    lifecycle belongs to the manager.

    :param client: Optional client to send through
    :type client: Optional[httpx.AsyncClient]
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self._client = client

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is not None:
            return self._client
        return await get_http_client()

    async def send(self, request: OutboundRequest) -> httpx.Response:
        """Send a request and return the fully read response.

        :param request: Request to send
        :type request: OutboundRequest
        :return: The HTTP response
        :rtype: httpx.Response
        :raises httpx.RequestError: On transport-level failures
        """
        client = await self._get_client()
        http_request = client.build_request(
            request.method.value,
            request.path,
            headers=request.headers,
            content=request.body,
        )
        return await client.send(http_request)


class HttpRequestSender:
    """Send built requests, optionally bounded by a timeout.

    :param http_client: Transport to send through
    :type http_client: DefaultHttpClient
    """

    def __init__(self, http_client: Optional[DefaultHttpClient] = None):
        self._http_client = http_client or DefaultHttpClient()

    async def send(
        self, request: OutboundRequest, timeout: Optional[float] = None
    ) -> httpx.Response:
        """Send ``request``.

        :param request: Request to send
        :type request: OutboundRequest
        :param timeout: Optional limit, in seconds, after which the in-flight
                        call is cancelled
        :type timeout: Optional[float]
        :return: The HTTP response
        :rtype: httpx.Response
        :raises RequestTimeoutError: If the timeout elapses before completion
        :raises httpx.RequestError: On transport-level failures
        """
        if timeout is None:
            return await self._http_client.send(request)

        try:
            return await asyncio.wait_for(self._http_client.send(request), timeout)
        except asyncio.TimeoutError as e:
            logger.debug(
                f"{request.method.value} {request.path} cancelled after {timeout}s"
            )
            raise RequestTimeoutError(
                f"{request.method.value} {request.path} timed out after {timeout}s",
                timeout=timeout,
            ) from e
