"""Authentication and authorization exceptions for authz."""

from .base import AuthZError


class AuthenticationError(AuthZError):
    """Base exception for authentication errors."""
    pass


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is missing, malformed or fails verification."""
    pass


class TokenExpiredError(AuthenticationError):
    """Raised when a JWT token has expired."""
    pass


class InvalidUserError(AuthenticationError):
    """Raised when the requesting user cannot be identified."""
    pass


class AuthorizationError(AuthZError):
    """Base exception for authorization errors."""
    pass


class PermissionDeniedError(AuthorizationError):
    """Raised when a user lacks the permissions a route requires."""
    pass
