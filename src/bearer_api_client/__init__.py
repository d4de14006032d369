"""Bearer-token-authenticated HTTP API client package.

This package obtains an auth token from a login endpoint, attaches it to
outgoing requests, retries transient failures and deserializes JSON
responses into typed results.

:var __version__: Current package version
:type __version__: str
"""

__version__ = "0.1.0"
