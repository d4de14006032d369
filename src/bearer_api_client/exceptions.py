"""Structured exception classes for the bearer API client."""

import json
from typing import Any, Dict, Optional


class BearerApiClientError(Exception):
    """Base exception for all bearer API client errors.

    :param message: Human-readable error message
    :param code: Optional error code for programmatic handling
    :param details: Optional dictionary containing additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize the exception with message, code, and details."""
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format.

        :return: Dictionary containing error code, message, and details
        """
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self) -> str:
        """Convert exception to JSON string.

        :return: JSON-encoded string representation of the exception
        """
        return json.dumps(self.to_dict())


class AuthenticationError(BearerApiClientError):
    """Raised when the token exchange with the auth endpoint fails.

    This is the only failure surfaced to callers of the authenticated
    services; every other request failure is reported as an absent result.

    :param message: Description of the authentication failure
    :param details: Optional additional context about the failure
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize authentication error with message and optional details."""
        super().__init__(message=message, code="AUTHENTICATION_ERROR", details=details)


class APIError(BearerApiClientError):
    """Raised for API-related errors.

    :param message: Description of the API error
    :param status_code: Optional HTTP status code from the API response
    :param response_body: Optional response body from the failed request
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
    ):
        """Initialize API error with message and optional response details."""
        details: Dict[str, Any] = {}
        if status_code:
            details["status_code"] = status_code
        if response_body:
            details["response_body"] = response_body
        super().__init__(message=message, code="API_ERROR", details=details)
        self.status_code = status_code
        self.response_body = response_body


class RequestTimeoutError(APIError):
    """Raised when an in-flight request is cancelled by its timeout.

    :param message: Description of the timeout error
    :param timeout: Optional timeout, in seconds, that elapsed
    """

    def __init__(self, message: str, timeout: Optional[float] = None):
        """Initialize timeout error with message and optional timeout."""
        super().__init__(message=message, status_code=None, response_body=None)
        self.code = "TIMEOUT_ERROR"
        if timeout is not None:
            self.details["timeout"] = timeout
        self.timeout = timeout


class ConfigurationError(BearerApiClientError):
    """Raised for configuration-related errors.

    :param message: Description of the configuration error
    :param setting: Optional name of the problematic setting
    """

    def __init__(self, message: str, setting: Optional[str] = None):
        """Initialize configuration error with message and optional setting."""
        details = {}
        if setting:
            details["setting"] = setting
        super().__init__(message=message, code="CONFIGURATION_ERROR", details=details)


class SerializationError(BearerApiClientError):
    """Raised when a JSON body cannot be decoded into the requested type.

    :param message: Description of the serialization error
    :param type_name: Optional name of the target type
    """

    def __init__(self, message: str, type_name: Optional[str] = None):
        """Initialize serialization error with message and optional type name."""
        details = {}
        if type_name:
            details["type"] = type_name
        super().__init__(message=message, code="SERIALIZATION_ERROR", details=details)
