"""Permission services: compilation and querying."""

from .query_engine import PermissionQueryEngine
from .permission_compiler import PermissionCompiler, compile_roles, load_roles

__all__ = [
    "PermissionCompiler",
    "PermissionQueryEngine",
    "compile_roles",
    "load_roles",
]
