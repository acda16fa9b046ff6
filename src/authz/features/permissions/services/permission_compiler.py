"""Permission compiler.

Turns the ordered roles of one user into a compiled index mapping
``(context, scope)`` to the merged Read/Write resource grants, ready to be
wrapped by a ``PermissionQueryEngine``.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Union

from ..entities import BlockKey, PermissionBlock, ResourceGrant, Role, parse_permission_lenient
from .query_engine import PermissionQueryEngine


logger = logging.getLogger(__name__)

RoleLike = Union[Role, Mapping[str, Any]]


class PermissionCompiler:
    """Compiles role permission strings into merged permission blocks."""

    def compile(self, roles: Iterable[RoleLike]) -> Dict[BlockKey, PermissionBlock]:
        """Build the compiled index for ``roles``.

        Permission strings with an unknown action (or no scope) are skipped.
        Blocks are kept in first-seen order.
        """
        blocks: Dict[BlockKey, PermissionBlock] = {}
        skipped = 0
        total = 0

        for role in load_roles(roles):
            for permission_string in role.permissions:
                total += 1
                parsed = parse_permission_lenient(permission_string)
                if parsed is None:
                    skipped += 1
                    logger.debug(f"Skipping invalid permission {permission_string!r} in role {role.id}")
                    continue

                key = BlockKey(role.context, parsed.scope)
                block = blocks.get(key, PermissionBlock())
                blocks[key] = block.with_grant(parsed.action, ResourceGrant.from_resource(parsed.resource))

        logger.debug(
            f"Compiled {total} permission strings into {len(blocks)} blocks "
            f"({skipped} skipped)"
        )
        return blocks


def load_roles(roles: Iterable[RoleLike]) -> List[Role]:
    """Convert role mappings to ``Role`` objects, skipping ones that cannot be loaded.

    A mapping without an ``id`` or with an unknown context is logged and
    dropped so the remaining roles still apply.
    """
    loaded: List[Role] = []
    for role in roles:
        if isinstance(role, Role):
            loaded.append(role)
            continue
        try:
            loaded.append(Role.from_dict(role))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Skipping invalid role {role!r}: {e!r}")
    return loaded


def compile_roles(roles: Iterable[RoleLike]) -> PermissionQueryEngine:
    """Compile ``roles`` and return a query engine over the result."""
    return PermissionQueryEngine(PermissionCompiler().compile(roles))
