"""Ports (outbound interfaces) for the authorization adapter."""

from resource_authz.infrastructure.ports.permission_checker import (
    PermissionCheckerPort,
)

__all__ = ["PermissionCheckerPort"]
