"""Authenticated API services."""

from .base_api_service import BaseApiService
from .deserialized_api_service import DeserializedApiService, EndpointResolver

__all__ = ["BaseApiService", "DeserializedApiService", "EndpointResolver"]
