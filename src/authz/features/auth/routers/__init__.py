"""Auth routers."""

from .iam_router import create_iam_router

__all__ = ["create_iam_router"]
