"""Role domain entity for the authz permissions feature.

A role is a named bundle of permission strings that all apply in the same
context. Roles are supplied by the embedding application for every
authorization decision and are never mutated by the engine.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Mapping, Optional

from ....config.constants import RoleContext


@dataclass(frozen=True)
class Role:
    """Domain entity representing a role assigned to a user."""

    id: str
    name: str
    context: RoleContext
    permissions: List[str] = field(default_factory=list)
    description: Optional[str] = None

    def __post_init__(self):
        """Normalize context and permissions."""
        if not isinstance(self.context, RoleContext):
            object.__setattr__(self, "context", RoleContext(self.context))
        object.__setattr__(self, "permissions", list(self.permissions))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Role":
        """Build a role from a plain mapping such as a decoded JSON object."""
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            context=data["context"],
            permissions=data.get("permissions") or [],
            description=data.get("description"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        data = asdict(self)
        data["context"] = self.context.value
        return data

    def __str__(self) -> str:
        return f"Role({self.id})"

    def __repr__(self) -> str:
        return (
            f"Role({self.id}, context={self.context.value}, "
            f"permissions={len(self.permissions)})"
        )
