import logging

from .errors import (
    ApiError,
    ArityError,
    AuthError,
    ConfigurationError,
    EdamClientError,
    NetworkError,
    RemoteError,
    SchemaError,
)
from .stores import NoteStoreClient, UserStoreClient

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NoteStoreClient",
    "UserStoreClient",
    "ApiError",
    "ArityError",
    "AuthError",
    "ConfigurationError",
    "EdamClientError",
    "NetworkError",
    "RemoteError",
    "SchemaError",
]
