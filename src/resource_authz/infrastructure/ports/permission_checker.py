"""
Permission Checker Port.

Defines the outbound capability the authorizer delegates every
permission query to.
"""

from typing import Protocol, Any, runtime_checkable


@runtime_checkable
class PermissionCheckerPort(Protocol):
    """
    Port for boolean permission checks on records and record classes.

    One implementation exists per policy backend (role grants, policy
    objects, an external policy service). Rule evaluation is entirely
    the implementation's concern.
    """

    def check(self, action: str, subject: Any) -> bool:
        """
        Check whether an action is permitted on a subject.

        Args:
            action: Action token (e.g. "show", "allow_relationship_comments")
            subject: Record instance, or record class for type-level checks

        Returns:
            True if permitted, False if denied
        """
        ...

    def supports(self, action: str, subject_type: type) -> bool:
        """
        Check whether an action is defined for a record type.

        Used to decide between a relation-specific action and the generic
        fallback action before calling check().

        Args:
            action: Relation-specific action token
            subject_type: Record class

        Returns:
            True if the backend has a rule for this action on the type
        """
        ...
