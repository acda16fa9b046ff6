"""Constants and enums for authz.

This module defines the permission string vocabulary, resource markers and
token claim values shared by the permission engine and the HTTP layer.
"""

from enum import Enum
from typing import Final, Optional, Tuple


class RoleContext(str, Enum):
    """Context in which every permission of a role applies."""

    LOCAL = "local"
    GLOBAL = "global"


class ContextMatch(str, Enum):
    """Contexts holding a compiled block for a given scope."""

    LOCAL = "local"
    GLOBAL = "global"
    BOTH = "both"
    NONE = "none"


class PermissionAction(str, Enum):
    """Action segment of a permission string."""

    READ = "Read"
    WRITE = "Write"
    READ_WRITE = "ReadWrite"

    @classmethod
    def parse(cls, token: str) -> Optional["PermissionAction"]:
        """Return the action for ``token`` or None when it is not recognized."""
        try:
            return cls(token)
        except ValueError:
            return None

    def expand(self) -> Tuple["PermissionAction", ...]:
        """Concrete actions granted or required by this action."""
        if self is PermissionAction.READ_WRITE:
            return (PermissionAction.READ, PermissionAction.WRITE)
        return (self,)


class ResourceMarkers:
    """Resource segment tokens with special meaning."""

    # Wildcard matching every resource of a scope
    ALL: Final[str] = "All"
    # Applied when a permission string has no resource segment
    DEFAULT: Final[str] = "__INTERNAL::[DEFAULT]__"


class PermissionSyntax:
    """Permission string grammar: ``Scope.Action[.Resource]``."""

    SEPARATOR: Final[str] = "."


class JWTClaims:
    """Registered claim values stamped on issued tokens."""

    ISSUER: Final[str] = "authz Server"
    AUDIENCE: Final[str] = "authz Client"
    SUBJECT: Final[str] = "authz User"
    USER_ID: Final[str] = "userId"


class HttpMethod(str, Enum):
    """HTTP methods accepted for the built-in endpoints."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class ErrorMessages:
    """Response messages returned by the HTTP layer."""

    INVALID_USER: Final[str] = "Invalid user"
    AUTHENTICATION_ERROR: Final[str] = "Authentication error"
    FORBIDDEN: Final[str] = "You don't have permissions to access this resource."
