"""HTTP utilities public API (barrel module).

This package provides:
- Bearer authorization header handling
- JSON request body encoding and request building
- Retry policy with exponential backoff
- Transport seam, timeout-bounded request sender and shared client manager

Recommended import pattern for consumers:
    from bearer_api_client.utils.http import RequestBuilder, RetryPolicy, HttpRequestSender
"""

from .authorization import AuthorizationHeaderHandler, AuthorizationManager
from .client_manager import (
    HTTPClientManager,
    create_limits,
    create_timeout,
    get_http_client,
    http_client_manager,
)
from .content import JSON_CONTENT_TYPE, build_json_content
from .request_builder import RequestBuilder
from .retry import RetryPolicy, async_retry, is_transient_response
from .transport import DefaultHttpClient, HttpRequestSender

__all__ = [
    "AuthorizationHeaderHandler",
    "AuthorizationManager",
    "HTTPClientManager",
    "http_client_manager",
    "get_http_client",
    "create_timeout",
    "create_limits",
    "JSON_CONTENT_TYPE",
    "build_json_content",
    "RequestBuilder",
    "RetryPolicy",
    "async_retry",
    "is_transient_response",
    "DefaultHttpClient",
    "HttpRequestSender",
]
