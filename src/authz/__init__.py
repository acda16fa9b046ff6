"""AuthZ - role based permission compilation and checking.

Compiles the roles of a user into a queryable permission index and answers
questions such as "can this user Read resource X of scope Y, locally or
globally". Ships a FastAPI integration with JWT authentication, route
guards and an IAM introspection endpoint.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import (
    RoleContext,
    ContextMatch,
    PermissionAction,
    ResourceMarkers,
    AuthZSettings,
    get_settings,
)

from .core.exceptions import (
    AuthZError,
    ConfigurationError,
    InvalidPermissionStringError,
    AuthenticationError,
    InvalidTokenError,
    TokenExpiredError,
    AuthorizationError,
    PermissionDeniedError,
    get_http_status_code,
    create_error_response,
)

from .features.permissions import (
    Role,
    FlattenedPermission,
    ResourceGrant,
    GrantKind,
    PermissionCompiler,
    PermissionQueryEngine,
    compile_roles,
)

from .features.auth import (
    AuthZ,
    RequestAuthorization,
    TokenService,
    AuthZMiddleware,
    get_authorization,
    require_permissions,
    require_local_permissions,
    require_global_permissions,
    require_actions,
    require_local_actions,
    require_global_actions,
)

__all__ = [
    "__version__",

    # Configuration
    "RoleContext",
    "ContextMatch",
    "PermissionAction",
    "ResourceMarkers",
    "AuthZSettings",
    "get_settings",

    # Exceptions
    "AuthZError",
    "ConfigurationError",
    "InvalidPermissionStringError",
    "AuthenticationError",
    "InvalidTokenError",
    "TokenExpiredError",
    "AuthorizationError",
    "PermissionDeniedError",
    "get_http_status_code",
    "create_error_response",

    # Permission engine
    "Role",
    "FlattenedPermission",
    "ResourceGrant",
    "GrantKind",
    "PermissionCompiler",
    "PermissionQueryEngine",
    "compile_roles",

    # FastAPI integration
    "AuthZ",
    "RequestAuthorization",
    "TokenService",
    "AuthZMiddleware",
    "get_authorization",
    "require_permissions",
    "require_local_permissions",
    "require_global_permissions",
    "require_actions",
    "require_local_actions",
    "require_global_actions",
]
