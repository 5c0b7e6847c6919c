"""Domain layer: action tokens, subject helpers and errors."""

from resource_authz.domain.value_objects import (
    Action,
    relationship_action,
    subject_type,
    subject_name,
    subject_id,
)
from resource_authz.domain.errors import (
    AuthzDomainError,
    AuthorizationDenied,
    PolicyNotDefinedError,
    ActionNotDefinedError,
    UnsupportedOperationError,
    ConfigurationError,
)

__all__ = [
    "Action",
    "relationship_action",
    "subject_type",
    "subject_name",
    "subject_id",
    "AuthzDomainError",
    "AuthorizationDenied",
    "PolicyNotDefinedError",
    "ActionNotDefinedError",
    "UnsupportedOperationError",
    "ConfigurationError",
]
