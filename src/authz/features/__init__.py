"""Feature packages for authz."""
