"""FastAPI authorization dependencies.

Guards are created once per route and check the permissions of the
current request against ``request.state.authz``:

    @app.get("/users", dependencies=[Depends(require_permissions("User.Read"))])
"""

import logging
from typing import Annotated, Callable

from fastapi import Depends, Request

from ...config.constants import ErrorMessages
from ...core.exceptions import ConfigurationError, PermissionDeniedError
from ..permissions.entities import parse_permission
from .entities.request_authorization import RequestAuthorization

logger = logging.getLogger(__name__)

Checker = Callable[[RequestAuthorization], Callable[..., bool]]


def get_authorization(request: Request) -> RequestAuthorization:
    """Get the authorization object attached by ``AuthZMiddleware``."""
    authorization = getattr(request.state, "authz", None)
    if authorization is None:
        raise ConfigurationError(
            "No authorization on request, is AuthZMiddleware installed for this route?"
        )
    return authorization


CurrentAuthorization = Annotated[RequestAuthorization, Depends(get_authorization)]


def _guard(checker: Checker, permissions: tuple, kind: str):
    # Fail at route definition rather than on the first request
    for permission in permissions:
        parse_permission(permission)

    async def dependency(authorization: CurrentAuthorization) -> RequestAuthorization:
        if not checker(authorization)(*permissions):
            logger.warning(
                f"User {authorization.get_user_identifier()!r} lacks {kind}: {list(permissions)}"
            )
            raise PermissionDeniedError(
                ErrorMessages.FORBIDDEN,
                details={"required": list(permissions), "kind": kind},
            )
        return authorization

    return dependency


def require_permissions(*permissions: str):
    """Require every permission, in any context."""
    return _guard(lambda a: a.has_permissions, permissions, "permissions")


def require_local_permissions(*permissions: str):
    """Require every permission in the local context."""
    return _guard(lambda a: a.has_local_permissions, permissions, "local permissions")


def require_global_permissions(*permissions: str):
    """Require every permission in the global context."""
    return _guard(lambda a: a.has_global_permissions, permissions, "global permissions")


def require_actions(*permissions: str):
    """Require a grant for every scope/action, whatever the resource."""
    return _guard(lambda a: a.has_actions, permissions, "actions")


def require_local_actions(*permissions: str):
    return _guard(lambda a: a.has_local_actions, permissions, "local actions")


def require_global_actions(*permissions: str):
    return _guard(lambda a: a.has_global_actions, permissions, "global actions")
