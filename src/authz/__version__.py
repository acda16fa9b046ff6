"""Version information for authz-core."""

__version__ = "0.3.0"
