"""Typed API operations addressed by logical endpoint key.

Payloads are serialized to JSON and responses decoded into the requested
type. An empty response yields the type's default value, so "no data" and
"request failed" are observed the same way by callers.
"""

from typing import Any, Callable, Mapping, Optional, Tuple, Type, TypeVar

from ..auth import TokenService
from ..client import ApiClient
from ..config import Settings
from ..exceptions import ConfigurationError
from ..utils.json import default_for, from_json, to_json
from .base_api_service import BaseApiService

T = TypeVar("T")

UrlResolver = Callable[[str], str]


class EndpointResolver:
    """Resolve logical endpoint keys to URLs from a lookup table.

    Absolute URLs in the table are returned unchanged; paths are joined
    to ``base_uri``.

    :param base_uri: Base URI paths are appended to
    :type base_uri: str
    :param endpoints: Mapping of endpoint key to path or absolute URL
    :type endpoints: Mapping[str, str]
    """

    def __init__(self, base_uri: str, endpoints: Mapping[str, str]):
        self.base_uri = base_uri.rstrip("/")
        self.endpoints = dict(endpoints)

    @classmethod
    def from_settings(cls, settings: Settings) -> "EndpointResolver":
        return cls(settings.base_uri, settings.endpoints)

    def __call__(self, endpoint_key: str) -> str:
        try:
            path = self.endpoints[endpoint_key]
        except KeyError:
            raise ConfigurationError(
                f"No URL configured for endpoint '{endpoint_key}'",
                setting=endpoint_key,
            ) from None
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_uri}/{path.lstrip('/')}"


class DeserializedApiService(BaseApiService):
    """Authenticated operations returning typed results.

    ``response_type`` must be constructible without arguments; its no-arg
    instance is returned for empty or failed responses.

    :param token_service: Service providing a token per call
    :type token_service: TokenService
    :param api_client: Client performing the requests
    :type api_client: ApiClient
    :param settings: Application settings
    :type settings: Settings
    :param url_resolver: Maps an endpoint key to a URL; defaults to an
                         :class:`EndpointResolver` built from ``settings``
    :type url_resolver: Optional[Callable[[str], str]]
    """

    def __init__(
        self,
        token_service: TokenService,
        api_client: ApiClient,
        settings: Settings,
        url_resolver: Optional[UrlResolver] = None,
    ):
        super().__init__(token_service, api_client)
        if settings is None:
            raise ValueError("settings is required")
        self.base_url = settings.base_uri
        self._resolve_url = url_resolver or EndpointResolver.from_settings(settings)

    def _build_request_data(
        self, endpoint_key: str, payload: Any
    ) -> Tuple[str, Optional[str]]:
        return self._resolve_url(endpoint_key), to_json(payload)

    @staticmethod
    def _deserialize_or_default(response: Optional[str], response_type: Type[T]) -> T:
        if response is None or not response.strip():
            return default_for(response_type)
        return from_json(response, response_type)

    async def get_as(self, endpoint_key: str, response_type: Type[T]) -> T:
        """GET the endpoint and decode the response into ``response_type``."""
        url = self._resolve_url(endpoint_key)
        response = await self.get(url)
        return self._deserialize_or_default(response, response_type)

    async def post_as(
        self, endpoint_key: str, payload: Any, response_type: Type[T]
    ) -> T:
        """POST ``payload`` as JSON and decode the response into ``response_type``."""
        url, content = self._build_request_data(endpoint_key, payload)
        response = await self.post(url, content)
        return self._deserialize_or_default(response, response_type)

    async def delete_as(
        self, endpoint_key: str, payload: Any, response_type: Type[T]
    ) -> T:
        """DELETE with ``payload`` as JSON and decode the response into ``response_type``."""
        url, content = self._build_request_data(endpoint_key, payload)
        response = await self.delete(url, content)
        return self._deserialize_or_default(response, response_type)
