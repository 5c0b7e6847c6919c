"""
Domain errors for the resource authorization adapter.

These errors provide a consistent interface for reporting failures
across the authorizer, the permission checker backends and the
framework integrations.
"""

from typing import Optional, Any

from resource_authz.domain.value_objects import subject_id, subject_name


class AuthzDomainError(Exception):
    """Base class for all authorization domain errors."""

    def __init__(
        self,
        message: str,
        code: str = "AUTHZ_ERROR",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class AuthorizationDenied(AuthzDomainError):
    """Raised when a permission check on a subject is denied."""

    def __init__(
        self,
        action: str,
        subject: Any,
        message: Optional[str] = None,
        code: str = "PERMISSION_DENIED",
    ):
        resource_type = subject_name(subject)
        record_id = subject_id(subject)
        resource_ids = [record_id] if record_id is not None else None

        details = {
            "resource_type": resource_type,
            "action": action,
            "resource_ids": resource_ids,
        }
        # Filter None values
        details = {k: v for k, v in details.items() if v is not None}
        super().__init__(
            message or f"Not allowed to {action} this {resource_type}",
            code,
            details,
        )
        self.action = action
        self.subject = subject
        self.resource_type = resource_type
        self.resource_ids = resource_ids


class PolicyNotDefinedError(AuthzDomainError):
    """Raised when no policy can be resolved for a subject type."""

    def __init__(
        self,
        message: str = "Policy not defined",
        code: str = "POLICY_NOT_DEFINED",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class ActionNotDefinedError(AuthzDomainError):
    """Raised when a policy has no rule for the requested action."""

    def __init__(
        self,
        message: str = "Action not defined",
        code: str = "ACTION_NOT_DEFINED",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class UnsupportedOperationError(AuthzDomainError):
    """Raised when the processor receives an operation it cannot dispatch."""

    def __init__(
        self,
        message: str = "Unsupported operation",
        code: str = "UNSUPPORTED_OPERATION",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class ConfigurationError(AuthzDomainError):
    """Raised when authorizer configuration is invalid."""

    def __init__(
        self,
        message: str,
        code: str = "CONFIGURATION_ERROR",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
