"""Permission query engine.

Answers point-in-time questions against one compiled permission index.
The index is read-only once the engine is built, so an engine can be
queried any number of times during a request and then discarded.

All query operations take permission strings in ``Scope.Action[.Resource]``
form and raise ``InvalidPermissionStringError`` for malformed strings
rather than answering ``False``.
"""

from types import MappingProxyType
from typing import List, Mapping, Tuple

from ....config.constants import ContextMatch, RoleContext
from ..entities import (
    BlockKey,
    FlattenedPermission,
    ParsedPermission,
    PermissionBlock,
    collapse,
    parse_permission,
    parse_scope,
)

BOTH_CONTEXTS: Tuple[RoleContext, ...] = (RoleContext.LOCAL, RoleContext.GLOBAL)


class PermissionQueryEngine:
    """Read-only query interface over a compiled permission index."""

    def __init__(self, blocks: Mapping[BlockKey, PermissionBlock]):
        self._blocks = MappingProxyType(dict(blocks))

    def __repr__(self) -> str:
        return f"PermissionQueryEngine(blocks={len(self._blocks)})"

    def unwrap(self) -> List[FlattenedPermission]:
        """Flatten every compiled block, in block order."""
        permissions: List[FlattenedPermission] = []
        for key, block in self._blocks.items():
            permissions.extend(collapse(key, block))
        return permissions

    # Full checks

    def check(self, permission: str) -> bool:
        """True if ``permission`` is granted in either context."""
        parsed = parse_permission(permission)
        return any(self._matches(parsed, context) for context in BOTH_CONTEXTS)

    def check_local(self, permission: str) -> bool:
        """True if ``permission`` is granted in the local context."""
        return self._matches(parse_permission(permission), RoleContext.LOCAL)

    def check_global(self, permission: str) -> bool:
        """True if ``permission`` is granted in the global context."""
        return self._matches(parse_permission(permission), RoleContext.GLOBAL)

    # Action-only checks

    def check_action(self, permission: str) -> bool:
        """True if any grant exists for the scope and action, in either context.

        The resource segment of ``permission`` is ignored.
        """
        parsed = parse_permission(permission)
        return any(self._matches_action(parsed, context) for context in BOTH_CONTEXTS)

    def check_action_local(self, permission: str) -> bool:
        return self._matches_action(parse_permission(permission), RoleContext.LOCAL)

    def check_action_global(self, permission: str) -> bool:
        return self._matches_action(parse_permission(permission), RoleContext.GLOBAL)

    def check_context(self, permission: str) -> ContextMatch:
        """Report which contexts hold a block for the scope of ``permission``."""
        scope = parse_scope(permission)
        has_local = BlockKey(RoleContext.LOCAL, scope) in self._blocks
        has_global = BlockKey(RoleContext.GLOBAL, scope) in self._blocks

        if has_local and has_global:
            return ContextMatch.BOTH
        if has_local:
            return ContextMatch.LOCAL
        if has_global:
            return ContextMatch.GLOBAL
        return ContextMatch.NONE

    # Matching rules

    def _matches(self, parsed: ParsedPermission, context: RoleContext) -> bool:
        block = self._blocks.get(BlockKey(context, parsed.scope))
        if block is None:
            return False

        return all(
            block.grant_for(action).allows(parsed.resource)
            for action in parsed.action.expand()
        )

    def _matches_action(self, parsed: ParsedPermission, context: RoleContext) -> bool:
        block = self._blocks.get(BlockKey(context, parsed.scope))
        if block is None:
            return False

        return all(
            not block.grant_for(action).is_empty
            for action in parsed.action.expand()
        )
