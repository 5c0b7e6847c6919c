"""
Identity protocols and implementations.

The adapter defines Identity as a Protocol, a contract that the host
application fulfills. Permission checker backends read the current
identity (the user a policy is evaluated for) from a context variable,
so the authorizer itself never deals with request state.
"""

from contextvars import ContextVar
from typing import Protocol, Optional, runtime_checkable
from dataclasses import dataclass, field


# ═══════════════════════════════════════════════════════════════
# CONTEXT VARIABLES
# ═══════════════════════════════════════════════════════════════

_identity_context: ContextVar["Identity"] = ContextVar("identity")


# ═══════════════════════════════════════════════════════════════
# PROTOCOL
# ═══════════════════════════════════════════════════════════════


@runtime_checkable
class Identity(Protocol):
    """Protocol for the user permission checks are evaluated for."""

    @property
    def user_id(self) -> str:
        """Unique identifier for the user."""
        ...

    @property
    def username(self) -> str:
        """Human-readable username."""
        ...

    @property
    def roles(self) -> list[str]:
        """Roles granted to the user."""
        ...

    @property
    def is_authenticated(self) -> bool:
        """Whether the identity represents an authenticated user."""
        ...


# ═══════════════════════════════════════════════════════════════
# IMPLEMENTATIONS
# ═══════════════════════════════════════════════════════════════


class AnonymousIdentity:
    """Default identity for unauthenticated requests."""

    user_id = "anonymous"
    username = "anonymous"
    roles: list[str] = []
    is_authenticated = False


@dataclass
class AuthenticatedIdentity:
    """Concrete identity for authenticated users."""

    user_id: str
    username: str
    roles: list[str] = field(default_factory=list)
    is_authenticated: bool = True


# ═══════════════════════════════════════════════════════════════
# CONTEXT MANAGEMENT
# ═══════════════════════════════════════════════════════════════


def get_identity() -> Identity:
    """
    Get current identity from context.

    Returns AnonymousIdentity if no identity has been set.
    """
    try:
        return _identity_context.get()
    except LookupError:
        return AnonymousIdentity()


def set_identity(identity: Identity) -> None:
    """
    Set identity in current context.

    Called by the host's authentication layer before API operations run.
    """
    _identity_context.set(identity)


def clear_identity() -> None:
    """Reset the current context to an anonymous identity."""
    _identity_context.set(AnonymousIdentity())
