"""Configuration settings for the bearer API client.

This module defines the connection and credential settings used by the
token service and the deserializing API service. Settings are loaded from
environment variables and .env files once, then passed explicitly to the
components that need them.
"""

from typing import Any, Dict, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Instances are frozen: once loaded, they can be shared between
    concurrent calls without coordination.

    :param base_uri: Base URI of the remote API (e.g. ``https://api.example.com``)
    :type base_uri: str
    :param usuario: Username sent to the authentication endpoint
    :type usuario: str
    :param senha: Password sent to the authentication endpoint
    :type senha: str
    :param request_timeout: Default timeout, in seconds, for token requests
    :type request_timeout: Optional[float]
    :param endpoints: Mapping of logical endpoint keys to URL paths
    :type endpoints: Dict[str, str]
    :param log_level: Logging level for the application
    :type log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    base_uri: str = Field("", description="Base URI of the remote API")
    usuario: str = Field("", description="Username for the authentication endpoint")
    senha: str = Field("", description="Password for the authentication endpoint")

    request_timeout: Optional[float] = Field(
        None, description="Timeout in seconds applied to token requests"
    )
    endpoints: Dict[str, str] = Field(
        default_factory=dict,
        description="Logical endpoint key to URL path mapping",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Logging level"
    )

    @field_validator("base_uri", "usuario", "senha", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        """Treat missing credential values as empty strings."""
        return "" if v is None else v

    @field_validator("base_uri")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URI so paths can be appended with a single slash."""
        return v.rstrip("/")


def load_settings(**overrides: Any) -> Settings:
    """Load a fresh settings instance.

    Values passed as keyword arguments take precedence over environment
    variables and the .env file.

    :param overrides: Explicit field values
    :return: Loaded settings
    :rtype: Settings
    """
    return Settings(**overrides)
