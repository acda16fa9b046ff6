"""Compiled permission blocks and their flattened form."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple

from ....config.constants import PermissionAction, RoleContext
from .grant import ResourceGrant, includes, merge


class BlockKey(NamedTuple):
    """Composite key of a compiled block."""

    context: RoleContext
    scope: str


@dataclass(frozen=True)
class PermissionBlock:
    """Merged Read/Write resource grants for one ``(context, scope)``."""

    read: ResourceGrant = field(default_factory=ResourceGrant.empty)
    write: ResourceGrant = field(default_factory=ResourceGrant.empty)

    def grant_for(self, action: PermissionAction) -> ResourceGrant:
        """Grant held for a concrete (non-composite) action."""
        if action is PermissionAction.READ:
            return self.read
        if action is PermissionAction.WRITE:
            return self.write
        raise ValueError(f"{action.value} is not a concrete action")

    def with_grant(self, action: PermissionAction, grant: ResourceGrant) -> "PermissionBlock":
        """Return a block with ``grant`` merged into each action ``action`` expands to."""
        read, write = self.read, self.write
        for concrete in action.expand():
            if concrete is PermissionAction.READ:
                read = merge(read, grant)
            else:
                write = merge(write, grant)
        return PermissionBlock(read=read, write=write)


@dataclass(frozen=True)
class FlattenedPermission:
    """Public, human-readable view of (part of) a compiled block."""

    context: RoleContext
    scope: str
    read: bool
    write: bool
    resources: ResourceGrant

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the introspection wire shape."""
        return {
            "context": self.context.value,
            "scope": self.scope,
            "action": {"read": self.read, "write": self.write},
            "resources": self.resources.to_serializable(),
        }


def collapse(key: BlockKey, block: PermissionBlock) -> List[FlattenedPermission]:
    """Turn a compiled block into one or two flattened entries.

    Identical Read and Write grants produce a single entry with both flags.
    Otherwise each non-empty action gets its own entry, Read first, and the
    other flag is set only when the other action's grant covers the entry's
    resources.
    """
    if block.read == block.write:
        if block.read.is_empty:
            return []
        return [FlattenedPermission(key.context, key.scope, True, True, block.read)]

    entries = []
    if not block.read.is_empty:
        entries.append(FlattenedPermission(
            key.context, key.scope,
            read=True,
            write=includes(block.write, block.read),
            resources=block.read,
        ))
    if not block.write.is_empty:
        entries.append(FlattenedPermission(
            key.context, key.scope,
            read=includes(block.read, block.write),
            write=True,
            resources=block.write,
        ))
    return entries
