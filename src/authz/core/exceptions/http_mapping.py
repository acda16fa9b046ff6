"""HTTP status code mapping for exceptions."""

from typing import Dict, Type

from .base import AuthZError, ConfigurationError, InvalidPermissionStringError
from .auth import (
    AuthenticationError,
    AuthorizationError,
    InvalidTokenError,
    InvalidUserError,
    PermissionDeniedError,
    TokenExpiredError,
)


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    InvalidPermissionStringError: 400,

    # 401 Unauthorized
    AuthenticationError: 401,
    InvalidTokenError: 401,
    TokenExpiredError: 401,
    InvalidUserError: 401,

    # 403 Forbidden
    AuthorizationError: 403,
    PermissionDeniedError: 403,

    # 500 Internal Server Error
    ConfigurationError: 500,
    AuthZError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Walks the exception's MRO so subclasses inherit their parent's status.
    """
    for exception_type in type(exception).__mro__:
        if exception_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exception_type]
    return 500
