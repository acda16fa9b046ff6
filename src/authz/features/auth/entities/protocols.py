"""Protocol interfaces for the callbacks an application plugs into authz.

Both callbacks may be plain functions or coroutines.
"""

from typing import Any, Awaitable, Optional, Protocol, Sequence, Union, runtime_checkable

from starlette.requests import Request

from ....features.permissions.entities import Role


@runtime_checkable
class UserIdentifierProtocol(Protocol):
    """Resolves the user behind an authentication request.

    Returning ``None`` rejects the request. Any exception raised is reported
    to the client as an invalid-user error.
    """

    def __call__(self, request: Request) -> Union[Optional[Any], Awaitable[Optional[Any]]]:
        ...


@runtime_checkable
class RolesProviderProtocol(Protocol):
    """Returns the roles held by an authenticated user."""

    def __call__(self, user_id: Any) -> Union[Sequence[Role], Awaitable[Sequence[Role]]]:
        ...
