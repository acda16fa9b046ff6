"""Resource grant value object for compiled permissions.

A grant describes which resources one action of a compiled block covers.
It is always in exactly one of three states:

- ``ALL``: every resource of the scope.
- ``DEFAULT``: the resource-less capability of the scope.
- ``SPECIFIC``: an explicit set of resource identifiers. An empty specific
  grant means the action was never granted.

``ALL`` absorbs everything and ``DEFAULT`` absorbs specific sets when
grants are merged, so the result of merging a sequence of grants does not
depend on its order.
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, List, Union

from ....config.constants import ResourceMarkers


class GrantKind(str, Enum):
    """State of a resource grant."""

    ALL = "all"
    DEFAULT = "default"
    SPECIFIC = "specific"


@dataclass(frozen=True)
class ResourceGrant:
    """Immutable resource state of one action in a compiled block."""

    kind: GrantKind
    resources: FrozenSet[str] = frozenset()

    def __post_init__(self):
        if self.kind is not GrantKind.SPECIFIC and self.resources:
            raise ValueError(f"{self.kind.value} grant cannot carry explicit resources")

    @classmethod
    def all(cls) -> "ResourceGrant":
        return _ALL

    @classmethod
    def default(cls) -> "ResourceGrant":
        return _DEFAULT

    @classmethod
    def empty(cls) -> "ResourceGrant":
        return _EMPTY

    @classmethod
    def specific(cls, resources: Iterable[str]) -> "ResourceGrant":
        return cls(GrantKind.SPECIFIC, frozenset(resources))

    @classmethod
    def from_resource(cls, resource: str) -> "ResourceGrant":
        """Grant for a single parsed resource segment."""
        if resource == ResourceMarkers.ALL:
            return _ALL
        if resource == ResourceMarkers.DEFAULT:
            return _DEFAULT
        return cls.specific((resource,))

    @property
    def is_all(self) -> bool:
        return self.kind is GrantKind.ALL

    @property
    def is_default(self) -> bool:
        return self.kind is GrantKind.DEFAULT

    @property
    def is_empty(self) -> bool:
        """True when nothing is granted for the action."""
        return self.kind is GrantKind.SPECIFIC and not self.resources

    def allows(self, resource: str) -> bool:
        """Check whether a request for ``resource`` is satisfied by this grant."""
        if self.kind is GrantKind.ALL:
            return True
        if self.kind is GrantKind.DEFAULT:
            return resource == ResourceMarkers.DEFAULT
        return resource in self.resources

    def to_serializable(self) -> Union[str, List[str]]:
        """Wire form: ``"All"``, the default marker string, or a sorted list."""
        if self.kind is GrantKind.ALL:
            return ResourceMarkers.ALL
        if self.kind is GrantKind.DEFAULT:
            return ResourceMarkers.DEFAULT
        return sorted(self.resources)

    def __str__(self) -> str:
        if self.kind is GrantKind.SPECIFIC:
            return "{" + ", ".join(sorted(self.resources)) + "}"
        return self.kind.value.upper()


_ALL = ResourceGrant(GrantKind.ALL)
_DEFAULT = ResourceGrant(GrantKind.DEFAULT)
_EMPTY = ResourceGrant(GrantKind.SPECIFIC)


def merge(old: ResourceGrant, new: ResourceGrant) -> ResourceGrant:
    """Combine two grants for the same action.

    Markers overwrite accumulated sets and are never downgraded: ``ALL``
    wins over anything, ``DEFAULT`` wins over any specific set, and two
    specific sets accumulate into their union.
    """
    if old.is_all or new.is_all:
        return _ALL
    if old.is_default or new.is_default:
        return _DEFAULT
    if not new.resources:
        return old
    if not old.resources:
        return new
    return ResourceGrant.specific(old.resources | new.resources)


def includes(container: ResourceGrant, contained: ResourceGrant) -> bool:
    """Check whether ``container`` covers every resource of ``contained``."""
    if container.is_all:
        return True
    if contained.is_empty:
        return True
    if container.is_default:
        return contained.is_default
    if contained.kind is not GrantKind.SPECIFIC:
        return False
    return contained.resources <= container.resources
