"""
py-resource-authz: Authorization adapter for resource-oriented APIs.

Maps create/read/update/delete and relationship operations on domain
records to permission checks against a pluggable permission checker.
"""

__version__ = "0.1.0"

from resource_authz.authorizer import Authorizer
from resource_authz.config import (
    AuthorizerConfig,
    configure,
    get_config,
    reset_config,
)
from resource_authz.domain.errors import (
    AuthzDomainError,
    AuthorizationDenied,
    PolicyNotDefinedError,
    ActionNotDefinedError,
    UnsupportedOperationError,
    ConfigurationError,
)
from resource_authz.domain.value_objects import Action, relationship_action
from resource_authz.identity import (
    Identity,
    AnonymousIdentity,
    AuthenticatedIdentity,
    get_identity,
    set_identity,
    clear_identity,
)
from resource_authz.infrastructure.ports.permission_checker import (
    PermissionCheckerPort,
)
from resource_authz.processor import (
    AuthorizingProcessor,
    Operation,
    OperationRequest,
    authorize_operation,
)

__all__ = [
    # Version
    "__version__",
    # Authorizer
    "Authorizer",
    "AuthorizingProcessor",
    "Operation",
    "OperationRequest",
    "authorize_operation",
    "PermissionCheckerPort",
    # Config
    "AuthorizerConfig",
    "configure",
    "get_config",
    "reset_config",
    # Domain
    "Action",
    "relationship_action",
    "AuthzDomainError",
    "AuthorizationDenied",
    "PolicyNotDefinedError",
    "ActionNotDefinedError",
    "UnsupportedOperationError",
    "ConfigurationError",
    # Identity
    "Identity",
    "AnonymousIdentity",
    "AuthenticatedIdentity",
    "get_identity",
    "set_identity",
    "clear_identity",
]
