"""Bearer API client models package."""

from .base_models import (
    ApiModel,
    AuthRequest,
    HttpMethod,
    OutboundRequest,
    TokenResponse,
)

__all__ = [
    "ApiModel",
    "AuthRequest",
    "TokenResponse",
    "HttpMethod",
    "OutboundRequest",
]
