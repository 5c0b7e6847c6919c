"""
Authorizer configuration.

Holds the relation-specific action prefixes and logging switches used
by the Authorizer, plus a process-wide default that host applications
set once at startup.
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional

from resource_authz.domain.errors import ConfigurationError


@dataclass(frozen=True)
class AuthorizerConfig:
    """
    Configuration for the Authorizer.

    Attributes:
        add_relationship_prefix: Prefix of the action checked when records are
            added to a to-many relationship (e.g. "allow_relationship_comments")
        remove_relationship_prefix: Prefix of the action checked when records
            are removed from a to-many relationship (e.g. "remove_from_comments")
        replace_relationship_prefix: Prefix of the action checked when a
            relationship is replaced wholesale (e.g. "replace_author")
        remove_to_one_prefix: Prefix of the action checked when a to-one
            relationship is cleared (e.g. "remove_author")
        log_decisions: Log every check (DEBUG) and denial (WARNING)
        denied_message: Optional fixed message for AuthorizationDenied
    """

    add_relationship_prefix: str = "allow_relationship_"
    remove_relationship_prefix: str = "remove_from_"
    replace_relationship_prefix: str = "replace_"
    remove_to_one_prefix: str = "remove_"
    log_decisions: bool = True
    denied_message: Optional[str] = None

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "AuthorizerConfig":
        """Build a config from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise ConfigurationError(
                f"Unknown authorizer settings: {', '.join(sorted(unknown))}",
                details={"unknown": sorted(unknown)},
            )
        return cls(**dict(values))


_config = AuthorizerConfig()


def get_config() -> AuthorizerConfig:
    """Return the process-wide default configuration."""
    return _config


def configure(**overrides: Any) -> AuthorizerConfig:
    """
    Override process-wide defaults.

    Example:
        configure(add_relationship_prefix="add_to_", log_decisions=False)
    """
    global _config
    known = {f.name for f in fields(AuthorizerConfig)}
    unknown = set(overrides) - known
    if unknown:
        raise ConfigurationError(
            f"Unknown authorizer settings: {', '.join(sorted(unknown))}",
            details={"unknown": sorted(unknown)},
        )
    _config = replace(_config, **overrides)
    return _config


def reset_config() -> AuthorizerConfig:
    """Restore the built-in defaults."""
    global _config
    _config = AuthorizerConfig()
    return _config
