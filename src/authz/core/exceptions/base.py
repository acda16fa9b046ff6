"""Base exceptions for authz.

All exceptions inherit from AuthZError and carry an error code and details
so the HTTP layer can render them consistently.
"""

from typing import Any, Dict, Optional


class AuthZError(Exception):
    """Base exception for all authz errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(AuthZError):
    """Raised when authz is wired or configured incorrectly."""
    pass


class InvalidPermissionStringError(AuthZError, ValueError):
    """Raised when a permission string passed to a query is malformed.

    Kept distinct from a ``False`` answer so a caller bug is never mistaken
    for an access denial.
    """

    def __init__(self, permission: Any, reason: str):
        super().__init__(
            f"Invalid permission string {permission!r}: {reason}",
            details={"permission": permission, "reason": reason},
        )
        self.permission = permission
        self.reason = reason


def response_error(message: str) -> Dict[str, str]:
    """Standardized error body returned by the HTTP layer."""
    return {"error": message}


def create_error_response(exception: AuthZError) -> Dict[str, Any]:
    """Create standardized error response from exception."""
    body: Dict[str, Any] = response_error(exception.message)
    body["code"] = exception.error_code
    return body
