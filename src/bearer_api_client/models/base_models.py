"""Shared Pydantic models for the bearer API client.

The models provide type safety and validation for:
- The credential exchange with the authentication endpoint
- Outbound requests as immutable value objects
- Payload and response types exchanged with the remote API
"""

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base model for JSON payloads exchanged with the remote API.

    Fields are written using camelCase names and read from either the
    camelCase name or the Python field name.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Auth Models
class AuthRequest(ApiModel):
    """Credentials posted to the authentication endpoint.

    :param usuario: Username
    :type usuario: str
    :param senha: Password
    :type senha: str
    """

    usuario: str = ""
    senha: str = ""


class TokenResponse(ApiModel):
    """Body returned by the authentication endpoint.

    :param token: Bearer token; empty when the endpoint omitted it
    :type token: str
    """

    token: str = ""


# Request Models
class HttpMethod(str, Enum):
    """HTTP methods issued by the API client."""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


class OutboundRequest(BaseModel):
    """A single outbound request, built per call and consumed once.

    Instances are immutable; header changes produce a new request.

    :param method: HTTP method
    :type method: HttpMethod
    :param path: Absolute URL, or a path relative to the client's base URL
    :type path: str
    :param body: Encoded request body, if any
    :type body: Optional[bytes]
    :param headers: Request headers
    :type headers: Dict[str, str]
    """

    model_config = ConfigDict(frozen=True)

    method: HttpMethod
    path: str
    body: Optional[bytes] = None
    headers: Dict[str, str] = Field(default_factory=dict)

    def get_header(self, name: str) -> Optional[str]:
        """Return a header value, matching the name case-insensitively."""
        for key, value in self.headers.items():
            if key.lower() == name.lower():
                return value
        return None

    def with_header(self, name: str, value: str) -> "OutboundRequest":
        """Return a copy with ``name`` set to ``value``, replacing any existing value."""
        headers = {k: v for k, v in self.headers.items() if k.lower() != name.lower()}
        headers[name] = value
        return self.model_copy(update={"headers": headers})

    def without_header(self, name: str) -> "OutboundRequest":
        """Return a copy with every ``name`` header removed."""
        headers = {k: v for k, v in self.headers.items() if k.lower() != name.lower()}
        return self.model_copy(update={"headers": headers})
