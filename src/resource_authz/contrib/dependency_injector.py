"""
Dependency Injector integration for resource-authz.

Provides an optional IoC Container with a pre-configured permission
checker, authorizer and processor. Host applications can extend this
container or use it directly.

Usage:
    from resource_authz.contrib.dependency_injector import AuthzContainer

    container = AuthzContainer()
    container.config.from_dict({
        "rbac": {"role_permissions": {"viewer": ["index", "show"]}},
        "authorizer": {"log_decisions": False},
    })

    # Or swap the backend
    container.permission_checker.override(
        providers.Singleton(PolicyPermissionChecker, {Article: ArticlePolicy})
    )

    authorizer = container.authorizer()
"""

from typing import Any, Mapping, Optional

from dependency_injector import containers, providers

from resource_authz.authorizer import Authorizer
from resource_authz.config import AuthorizerConfig
from resource_authz.infrastructure.adapters.rbac import SimpleRBACPermissionChecker
from resource_authz.processor import AuthorizingProcessor


def build_authorizer_config(values: Optional[Mapping[str, Any]]) -> AuthorizerConfig:
    """Build AuthorizerConfig from the ``authorizer`` config section, if any."""
    return AuthorizerConfig.from_dict(values or {})


class AuthzContainer(containers.DeclarativeContainer):
    """
    IoC Container for authorization services.

    Overridable dependencies:
    - permission_checker: PermissionCheckerPort implementation
      (default: SimpleRBACPermissionChecker from config.rbac.role_permissions)

    Config (all optional except rbac.role_permissions for the default checker):
    - rbac.role_permissions: role -> list of grants
    - authorizer.*: AuthorizerConfig fields
    """

    config = providers.Configuration()

    permission_checker = providers.Singleton(
        SimpleRBACPermissionChecker,
        role_permissions=config.rbac.role_permissions,
    )

    authorizer_config = providers.Singleton(
        build_authorizer_config,
        config.authorizer,
    )

    authorizer = providers.Factory(
        Authorizer,
        checker=permission_checker,
        config=authorizer_config,
    )

    processor = providers.Factory(
        AuthorizingProcessor,
        authorizer=authorizer,
    )
