"""Authentication package."""

from .token_service import AUTH_PATH, TokenService

__all__ = ["AUTH_PATH", "TokenService"]
