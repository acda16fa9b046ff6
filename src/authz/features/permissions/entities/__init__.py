"""Permission entities package.

Value objects for roles, parsed permission strings, resource grants and
compiled permission blocks.
"""

from .role import Role
from .permission import (
    ParsedPermission,
    parse_permission,
    parse_permission_lenient,
    parse_scope,
)
from .grant import GrantKind, ResourceGrant, merge, includes
from .block import BlockKey, PermissionBlock, FlattenedPermission, collapse

__all__ = [
    # Roles
    "Role",

    # Permission strings
    "ParsedPermission",
    "parse_permission",
    "parse_permission_lenient",
    "parse_scope",

    # Grants
    "GrantKind",
    "ResourceGrant",
    "merge",
    "includes",

    # Compiled blocks
    "BlockKey",
    "PermissionBlock",
    "FlattenedPermission",
    "collapse",
]
