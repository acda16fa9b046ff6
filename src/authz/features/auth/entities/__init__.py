"""Auth entities package."""

from .protocols import UserIdentifierProtocol, RolesProviderProtocol
from .request_authorization import RequestAuthorization

__all__ = [
    "UserIdentifierProtocol",
    "RolesProviderProtocol",
    "RequestAuthorization",
]
