"""
Value objects for authorization queries.

Action tokens and helpers that describe the subject of a permission
check (a record instance or a record class).
"""

from enum import Enum
from typing import Any, Optional


class Action(str, Enum):
    """Generic CRUD actions understood by every permission checker."""

    INDEX = "index"
    SHOW = "show"
    CREATE = "create"
    UPDATE = "update"
    DESTROY = "destroy"

    def __str__(self) -> str:
        return self.value


def relationship_action(prefix: str, relation: str) -> str:
    """
    Build a relation-specific action token.

    Example:
        relationship_action("allow_relationship_", "comments")
        -> "allow_relationship_comments"
    """
    return f"{prefix}{relation}"


def subject_type(subject: Any) -> type:
    """Return the record class for a subject (the class itself if given one)."""
    if isinstance(subject, type):
        return subject
    return type(subject)


def subject_name(subject: Any) -> str:
    """
    Resource type name of a subject.

    Uses the class attribute ``resource_type`` when present, otherwise
    the lowercased class name.
    """
    cls = subject_type(subject)
    name = getattr(cls, "resource_type", None)
    if isinstance(name, str) and name:
        return name
    return cls.__name__.lower()


def subject_id(subject: Any) -> Optional[str]:
    """Identifier of a record instance, or None for classes and new records."""
    if isinstance(subject, type):
        return None
    value = getattr(subject, "id", None)
    if value is None:
        return None
    return str(value)
