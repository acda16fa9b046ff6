"""Exceptions module for authz."""

from .base import (
    AuthZError,
    ConfigurationError,
    InvalidPermissionStringError,
    response_error,
    create_error_response,
)
from .auth import (
    AuthenticationError,
    InvalidTokenError,
    TokenExpiredError,
    InvalidUserError,
    AuthorizationError,
    PermissionDeniedError,
)
from .http_mapping import HTTP_STATUS_MAP, get_http_status_code

__all__ = [
    # Base
    "AuthZError",
    "ConfigurationError",
    "InvalidPermissionStringError",

    # Authentication
    "AuthenticationError",
    "InvalidTokenError",
    "TokenExpiredError",
    "InvalidUserError",

    # Authorization
    "AuthorizationError",
    "PermissionDeniedError",

    # Utilities
    "HTTP_STATUS_MAP",
    "get_http_status_code",
    "response_error",
    "create_error_response",
]
