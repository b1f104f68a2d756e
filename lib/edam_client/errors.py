from __future__ import annotations

from typing import Any


class EdamClientError(Exception):
    """Base client error."""


class ConfigurationError(EdamClientError, ValueError):
    """Client constructed without a required option."""


class SchemaError(EdamClientError):
    """Stub method without a matching schema entry."""


class ArityError(EdamClientError, TypeError):
    def __init__(self, method: str, expected: int, actual: int):
        super().__init__(
            f"Incorrect number of arguments passed to {method}: expected {expected} but found {actual}"
        )
        self.method = method
        self.expected = expected
        self.actual = actual


class NetworkError(EdamClientError):
    """Transport/network layer error."""


class ApiError(EdamClientError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class AuthError(ApiError):
    """Auth-related HTTP error."""


class RemoteError(EdamClientError):
    """Declared service exception returned in a reply."""

    def __init__(self, method: str, name: str, payload: Any = None):
        super().__init__(f"{method} raised {name}: {payload!r}")
        self.method = method
        self.name = name
        self.payload = payload
