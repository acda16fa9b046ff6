"""Small helpers shared by authz features."""

from .awaitables import maybe_await
from .requests import request_kind

__all__ = [
    "maybe_await",
    "request_kind",
]
