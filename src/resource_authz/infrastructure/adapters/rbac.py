"""
Simple RBAC Permission Checker.

Implements a basic role-based permission checker that doesn't rely
on an external policy engine. Suitable for simple applications.
"""

from typing import Any, Optional, Dict, List, Set, Protocol
import logging

from resource_authz.domain.value_objects import subject_name
from resource_authz.identity import get_identity
from resource_authz.infrastructure.ports.permission_checker import (
    PermissionCheckerPort,
)

logger = logging.getLogger(__name__)

WILDCARD = "*"


# ----------------------------------------------------------------------
# PROTOCOLS & STRATEGIES
# ----------------------------------------------------------------------


class RoleExtractor(Protocol):
    """Protocol for extracting the current user's roles."""

    def __call__(self) -> List[str]:
        ...


def default_role_extractor() -> List[str]:
    """Default extractor reading roles from the identity context."""
    return list(getattr(get_identity(), "roles", None) or [])


# ----------------------------------------------------------------------
# SIMPLE RBAC CHECKER
# ----------------------------------------------------------------------


class SimpleRBACPermissionChecker(PermissionCheckerPort):
    """
    Simple Role-Based Permission Checker.

    Maps roles to granted actions, optionally scoped to a resource type.

    Configuration format:
    {
        "viewer": ["index", "show"],
        "editor": ["article:update", "article:allow_relationship_comments"],
        "moderator": ["comment:*"],
        "admin": ["*"],
    }

    A bare action applies to every resource type. Wildcard grants allow
    any action but never *define* a relation-specific action, so
    supports() only reports explicitly named actions.
    """

    def __init__(
        self,
        role_permissions: Dict[str, List[str]],
        role_extractor: Optional[RoleExtractor] = None,
        roles: Optional[List[str]] = None,
    ):
        self.role_permissions = role_permissions
        self._role_map: Dict[str, Set[tuple[str, str]]] = {
            role: {self._parse_grant(grant) for grant in grants}
            for role, grants in role_permissions.items()
        }
        self.role_extractor = role_extractor or default_role_extractor
        self.roles = roles

    @staticmethod
    def _parse_grant(grant: str) -> tuple[str, str]:
        """Split "resource:action" into (resource, action); bare → ("*", action)."""
        resource, sep, action = grant.partition(":")
        if not sep:
            return WILDCARD, grant
        return resource or WILDCARD, action or WILDCARD

    def _get_user_roles(self) -> List[str]:
        """Extract roles using strategy."""
        if self.roles:
            return self.roles
        return self.role_extractor()

    def _has_permission(
        self, user_roles: List[str], action: str, resource_type: str
    ) -> bool:
        """Check if any user role grants the action on the resource type."""
        for role in user_roles:
            for resource, granted in self._role_map.get(role, set()):
                if resource not in (WILDCARD, resource_type):
                    continue
                if granted == WILDCARD or granted == action:
                    return True
        return False

    def _log_decision(
        self, allowed: bool, action: str, resource: str, roles: List[str]
    ):
        """Log authorization decision."""
        level = logging.DEBUG if allowed else logging.WARNING
        logger.log(
            level,
            "Authz Decision: %s | Action: %s | Resource: %s | Roles: %s",
            "ALLOWED" if allowed else "DENIED",
            action,
            resource,
            roles,
        )

    def check(self, action: str, subject: Any) -> bool:
        roles = self._get_user_roles()
        resource_type = subject_name(subject)
        allowed = self._has_permission(roles, str(action), resource_type)

        self._log_decision(allowed, str(action), resource_type, roles)
        return allowed

    def supports(self, action: str, subject_type: type) -> bool:
        resource_type = subject_name(subject_type)
        for grants in self._role_map.values():
            for resource, granted in grants:
                if granted == action and resource in (WILDCARD, resource_type):
                    return True
        return False

    def permitted_actions(self, subject: Any) -> List[str]:
        """List explicit actions the current roles grant on a subject's type."""
        roles = self._get_user_roles()
        resource_type = subject_name(subject)
        actions = set()
        for role in roles:
            for resource, granted in self._role_map.get(role, set()):
                if resource in (WILDCARD, resource_type):
                    actions.add(granted)
        return sorted(actions)
