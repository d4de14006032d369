"""API client package."""

from .api_client import ApiClient, create_api_client

__all__ = ["ApiClient", "create_api_client"]
