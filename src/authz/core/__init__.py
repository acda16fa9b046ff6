"""Core building blocks shared across authz features."""
