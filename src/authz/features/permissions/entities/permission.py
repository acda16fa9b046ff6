"""Permission string parsing for the authz permissions feature.

Permission strings have the form ``Scope.Action[.Resource]``, for example
``User.ReadWrite.All``, ``Report.Read.monthly`` or ``Billing.Write``. A
missing resource segment and the internal default marker are the same
value once parsed.
"""

from dataclasses import dataclass
from typing import Optional

from ....config.constants import PermissionAction, PermissionSyntax, ResourceMarkers
from ....core.exceptions import InvalidPermissionStringError


@dataclass(frozen=True)
class ParsedPermission:
    """Immutable value object for a parsed permission string."""

    scope: str
    action: PermissionAction
    resource: str = ResourceMarkers.DEFAULT

    @property
    def is_default_resource(self) -> bool:
        return self.resource == ResourceMarkers.DEFAULT

    @property
    def is_all_resources(self) -> bool:
        return self.resource == ResourceMarkers.ALL

    def __str__(self) -> str:
        parts = [self.scope, self.action.value]
        if not self.is_default_resource:
            parts.append(self.resource)
        return PermissionSyntax.SEPARATOR.join(parts)


def _split(permission: str):
    if not isinstance(permission, str):
        raise InvalidPermissionStringError(permission, "permission must be a string")

    # Segments past the third are ignored; an empty third segment is a resource
    segments = permission.split(PermissionSyntax.SEPARATOR)
    scope = segments[0]
    action = segments[1] if len(segments) > 1 else ""
    resource = segments[2] if len(segments) > 2 else ResourceMarkers.DEFAULT
    return scope, action, resource


def parse_permission_lenient(permission: str) -> Optional[ParsedPermission]:
    """Parse a granted permission string, returning None when it is unusable.

    Used for role data, where one bad entry must not invalidate the rest of
    a user's grants.
    """
    try:
        scope, action_token, resource = _split(permission)
    except InvalidPermissionStringError:
        return None

    action = PermissionAction.parse(action_token)
    if not scope or action is None:
        return None

    return ParsedPermission(scope=scope, action=action, resource=resource)


def parse_permission(permission: str) -> ParsedPermission:
    """Parse a queried permission string.

    Raises:
        InvalidPermissionStringError: if the scope or action segment is
            missing or the action token is not recognized.
    """
    scope, action_token, resource = _split(permission)

    if not scope:
        raise InvalidPermissionStringError(permission, "missing scope segment")
    if not action_token:
        raise InvalidPermissionStringError(permission, "missing action segment")

    action = PermissionAction.parse(action_token)
    if action is None:
        allowed = ", ".join(a.value for a in PermissionAction)
        raise InvalidPermissionStringError(
            permission, f"unknown action {action_token!r}, expected one of: {allowed}"
        )

    return ParsedPermission(scope=scope, action=action, resource=resource)


def parse_scope(permission: str) -> str:
    """Extract the scope segment, ignoring action and resource.

    Raises:
        InvalidPermissionStringError: if the scope segment is missing.
    """
    scope, _, _ = _split(permission)
    if not scope:
        raise InvalidPermissionStringError(permission, "missing scope segment")
    return scope
