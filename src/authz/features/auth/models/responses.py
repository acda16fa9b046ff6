"""Authorization API response models."""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ....config.constants import RoleContext


class TokenResponse(BaseModel):
    """Authentication endpoint response."""

    model_config = ConfigDict(populate_by_name=True)

    token: str = Field(..., description="Signed JWT")
    expires_in: int = Field(..., alias="expiresIn", description="Token lifetime in seconds")


class RoleModel(BaseModel):
    """Role as reported by the IAM endpoint."""

    id: str
    name: str
    context: RoleContext
    permissions: List[str] = Field(default_factory=list)
    description: Optional[str] = None


class PermissionActionModel(BaseModel):
    read: bool
    write: bool


class FlattenedPermissionModel(BaseModel):
    """Effective permission as reported by the IAM endpoint."""

    context: RoleContext
    scope: str
    action: PermissionActionModel
    resources: Union[str, List[str]] = Field(
        ..., description="'All', the default marker, or explicit resource identifiers"
    )


class IamResponse(BaseModel):
    """Identity and effective permissions of the current user."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: Any = Field(..., alias="userId")
    roles: List[RoleModel]
    permissions: List[FlattenedPermissionModel]
