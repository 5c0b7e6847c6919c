"""Permission checker adapters (role grants, policy objects)."""

from resource_authz.infrastructure.adapters.rbac import (
    SimpleRBACPermissionChecker,
    RoleExtractor,
    default_role_extractor,
)
from resource_authz.infrastructure.adapters.policy import (
    Policy,
    PolicyPermissionChecker,
    rule,
)

__all__ = [
    "SimpleRBACPermissionChecker",
    "RoleExtractor",
    "default_role_extractor",
    "Policy",
    "PolicyPermissionChecker",
    "rule",
]
