"""Compose outbound requests from method, path, body and token."""

from typing import Optional

from ...models import HttpMethod, OutboundRequest
from .authorization import AuthorizationManager
from .content import build_json_content


class RequestBuilder:
    """Build :class:`OutboundRequest` objects.

    The body, when present, is attached as UTF-8 ``application/json``;
    the authorization header is delegated to the
    :class:`AuthorizationManager`.
    """

    def __init__(self, authorization_manager: Optional[AuthorizationManager] = None):
        self._authorization_manager = authorization_manager or AuthorizationManager()

    def build(
        self,
        method: HttpMethod,
        path: str,
        body: Optional[str] = None,
        token: Optional[str] = None,
    ) -> OutboundRequest:
        """Build a request.

        :param method: HTTP method
        :type method: HttpMethod
        :param path: Target URL
        :type path: str
        :param body: JSON body text; blank or None attaches no body
        :type body: Optional[str]
        :param token: Bearer token; blank or None sends no authorization
        :type token: Optional[str]
        :return: The built request
        :rtype: OutboundRequest
        """
        request = OutboundRequest(method=HttpMethod(method), path=path)

        encoded = build_json_content(body)
        if encoded is not None:
            content, headers = encoded
            request = request.model_copy(update={"body": content, "headers": headers})

        return self._authorization_manager.add_authorization_header(request, token)
