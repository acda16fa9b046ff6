"""Auth feature for authz.

FastAPI integration around the permission engine:
- JWT authentication endpoint and bearer token validation
- per-request ``RequestAuthorization`` on ``request.state.authz``
- route guards and the IAM introspection endpoint
"""

from .authz import AuthZ
from .entities import RequestAuthorization, UserIdentifierProtocol, RolesProviderProtocol
from .services import TokenService, IssuedToken
from .middleware import AuthZMiddleware, configure_authz_exception_handlers
from .dependencies import (
    get_authorization,
    CurrentAuthorization,
    require_permissions,
    require_local_permissions,
    require_global_permissions,
    require_actions,
    require_local_actions,
    require_global_actions,
)
from .routers import create_iam_router

__all__ = [
    # Facade
    "AuthZ",

    # Entities
    "RequestAuthorization",
    "UserIdentifierProtocol",
    "RolesProviderProtocol",

    # Services
    "TokenService",
    "IssuedToken",

    # Middleware
    "AuthZMiddleware",
    "configure_authz_exception_handlers",

    # Dependencies
    "get_authorization",
    "CurrentAuthorization",
    "require_permissions",
    "require_local_permissions",
    "require_global_permissions",
    "require_actions",
    "require_local_actions",
    "require_global_actions",

    # Routers
    "create_iam_router",
]
