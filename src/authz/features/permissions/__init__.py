"""Permissions feature for authz.

Feature-first layout for permission compilation and querying:
- entities/: roles, permission strings, resource grants, compiled blocks
- services/: the compiler and the query engine
"""

from .entities import (
    Role,
    ParsedPermission,
    parse_permission,
    GrantKind,
    ResourceGrant,
    BlockKey,
    PermissionBlock,
    FlattenedPermission,
)
from .services import PermissionCompiler, PermissionQueryEngine, compile_roles, load_roles

__all__ = [
    # Entities
    "Role",
    "ParsedPermission",
    "parse_permission",
    "GrantKind",
    "ResourceGrant",
    "BlockKey",
    "PermissionBlock",
    "FlattenedPermission",

    # Services
    "PermissionCompiler",
    "PermissionQueryEngine",
    "compile_roles",
    "load_roles",
]
