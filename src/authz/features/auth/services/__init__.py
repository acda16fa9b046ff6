"""Auth services."""

from .token_service import TokenService, IssuedToken

__all__ = ["TokenService", "IssuedToken"]
