"""Bearer authorization header handling for outbound requests."""

from typing import Optional

from ...models import OutboundRequest

AUTHORIZATION_HEADER = "Authorization"
BEARER_SCHEME = "Bearer"


class AuthorizationHeaderHandler:
    """Set or clear the bearer ``Authorization`` header on a request."""

    def apply(self, request: OutboundRequest, token: Optional[str]) -> OutboundRequest:
        """Return ``request`` with the authorization header for ``token``.

        A non-blank token sets ``Authorization: Bearer <token>``; a blank or
        missing token removes any existing authorization header.

        :param request: Request to update
        :type request: OutboundRequest
        :param token: Bearer token, or None
        :type token: Optional[str]
        :return: New request with the header applied
        :rtype: OutboundRequest
        """
        if token and token.strip():
            return request.with_header(AUTHORIZATION_HEADER, f"{BEARER_SCHEME} {token}")
        return request.without_header(AUTHORIZATION_HEADER)


class AuthorizationManager:
    """Entry point the request builder uses to authorize requests.

    Delegates to an :class:`AuthorizationHeaderHandler`, which can be
    swapped for a different header scheme.
    """

    def __init__(self, header_handler: Optional[AuthorizationHeaderHandler] = None):
        self._header_handler = header_handler or AuthorizationHeaderHandler()

    def add_authorization_header(
        self, request: OutboundRequest, token: Optional[str]
    ) -> OutboundRequest:
        return self._header_handler.apply(request, token)
