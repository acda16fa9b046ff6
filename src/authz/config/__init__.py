"""Configuration module for authz.

Constants, environment-driven settings and logging configuration.
"""

from .constants import (
    RoleContext,
    ContextMatch,
    PermissionAction,
    ResourceMarkers,
    PermissionSyntax,
    JWTClaims,
    HttpMethod,
    ErrorMessages,
)
from .settings import AuthZSettings, get_settings
from .logging_config import (
    setup_logging,
    LoggingConfig,
    LogVerbosity,
    LogFormat,
)

__all__ = [
    # Constants
    "RoleContext",
    "ContextMatch",
    "PermissionAction",
    "ResourceMarkers",
    "PermissionSyntax",
    "JWTClaims",
    "HttpMethod",
    "ErrorMessages",

    # Settings
    "AuthZSettings",
    "get_settings",

    # Logging
    "setup_logging",
    "LoggingConfig",
    "LogVerbosity",
    "LogFormat",
]
