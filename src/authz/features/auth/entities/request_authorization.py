"""Per-request authorization object.

Built once per authenticated request from the user's roles and attached to
``request.state.authz``. Route handlers and guards use it to check
permissions; the IAM endpoint uses it to report effective permissions.
"""

import copy
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Union

from ....config.constants import ContextMatch, RoleContext
from ....features.permissions import (
    FlattenedPermission,
    PermissionQueryEngine,
    Role,
    compile_roles,
    load_roles,
)


class RequestAuthorization:
    """Authorization methods bound to one user for one request."""

    def __init__(self, user_id: Any, roles: Sequence[Role], engine: PermissionQueryEngine):
        self._user_id = user_id
        self._roles = list(roles)
        self._engine = engine
        self._permissions = engine.unwrap()

    @classmethod
    def build(cls, user_id: Any, roles: Iterable[Union[Role, Mapping[str, Any]]]) -> "RequestAuthorization":
        """Compile ``roles`` for ``user_id``, dropping roles that cannot be loaded."""
        roles = load_roles(roles)
        return cls(user_id, roles, compile_roles(roles))

    @property
    def engine(self) -> PermissionQueryEngine:
        return self._engine

    # Checks

    def has_permissions(self, *permissions: str) -> bool:
        """Every permission is granted in some context."""
        return all(self._engine.check(p) for p in permissions)

    def has_local_permissions(self, *permissions: str) -> bool:
        return all(self._engine.check_local(p) for p in permissions)

    def has_global_permissions(self, *permissions: str) -> bool:
        return all(self._engine.check_global(p) for p in permissions)

    def has_actions(self, *permissions: str) -> bool:
        """Every scope/action pair has some grant, whatever the resource."""
        return all(self._engine.check_action(p) for p in permissions)

    def has_local_actions(self, *permissions: str) -> bool:
        return all(self._engine.check_action_local(p) for p in permissions)

    def has_global_actions(self, *permissions: str) -> bool:
        return all(self._engine.check_action_global(p) for p in permissions)

    def get_permission_context(self, permission: str) -> ContextMatch:
        return self._engine.check_context(permission)

    # Introspection (copies, so callers cannot alter request state)

    def get_roles(self) -> List[Role]:
        return copy.deepcopy(self._roles)

    def get_permissions(self) -> List[FlattenedPermission]:
        return list(self._permissions)

    def get_local_permissions(self) -> List[FlattenedPermission]:
        return [p for p in self._permissions if p.context is RoleContext.LOCAL]

    def get_global_permissions(self) -> List[FlattenedPermission]:
        return [p for p in self._permissions if p.context is RoleContext.GLOBAL]

    def get_user_identifier(self) -> Any:
        return self._user_id

    def to_iam(self) -> Dict[str, Any]:
        """Introspection payload: ``{userId, roles, permissions}``."""
        return {
            "userId": self._user_id,
            "roles": [role.to_dict() for role in self._roles],
            "permissions": [permission.to_dict() for permission in self._permissions],
        }

    def __repr__(self) -> str:
        return f"RequestAuthorization(user={self._user_id!r}, roles={len(self._roles)})"
