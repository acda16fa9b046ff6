"""Auth API models."""

from .responses import (
    TokenResponse,
    RoleModel,
    PermissionActionModel,
    FlattenedPermissionModel,
    IamResponse,
)

__all__ = [
    "TokenResponse",
    "RoleModel",
    "PermissionActionModel",
    "FlattenedPermissionModel",
    "IamResponse",
]
