"""
Tests for the RBAC permission checker.
"""

import logging

import pytest

from records import Article, Comment, Tag
from resource_authz.authorizer import Authorizer
from resource_authz.domain.errors import AuthorizationDenied
from resource_authz.identity import AuthenticatedIdentity, set_identity
from resource_authz.infrastructure.adapters.rbac import SimpleRBACPermissionChecker
from resource_authz.infrastructure.ports.permission_checker import (
    PermissionCheckerPort,
)


@pytest.fixture
def policy_config():
    return {
        "viewer": ["index", "show"],
        "editor": ["article:update", "article:allow_relationship_comments"],
        "moderator": ["comment:*"],
        "superuser": ["*"],
    }


def test_implements_port(policy_config):
    assert isinstance(SimpleRBACPermissionChecker(policy_config), PermissionCheckerPort)


def test_check_bare_action_applies_to_every_type(policy_config):
    checker = SimpleRBACPermissionChecker(policy_config, roles=["viewer"])
    assert checker.check("show", Article())
    assert checker.check("index", Comment)
    assert not checker.check("update", Article())


def test_check_scoped_grant(policy_config):
    checker = SimpleRBACPermissionChecker(policy_config, roles=["editor"])
    assert checker.check("update", Article(id=1))
    assert not checker.check("update", Comment(id=1))


def test_check_resource_wildcard(policy_config):
    checker = SimpleRBACPermissionChecker(policy_config, roles=["moderator"])
    assert checker.check("destroy", Comment(id=1))
    assert not checker.check("destroy", Article(id=1))


def test_check_superuser_wildcard(policy_config):
    checker = SimpleRBACPermissionChecker(policy_config, roles=["superuser"])
    assert checker.check("nuke", Tag())


def test_unknown_role_denied(policy_config):
    checker = SimpleRBACPermissionChecker(policy_config, roles=["ghost"])
    assert not checker.check("show", Article())


def test_roles_from_identity_context(policy_config):
    checker = SimpleRBACPermissionChecker(policy_config)
    assert not checker.check("show", Article())

    set_identity(AuthenticatedIdentity(user_id="u1", username="ann", roles=["viewer"]))
    assert checker.check("show", Article())


def test_custom_role_extractor(policy_config):
    checker = SimpleRBACPermissionChecker(
        policy_config, role_extractor=lambda: ["editor"]
    )
    assert checker.check("update", Article())


def test_supports_only_explicit_actions(policy_config):
    checker = SimpleRBACPermissionChecker(policy_config)
    assert checker.supports("allow_relationship_comments", Article)
    assert not checker.supports("allow_relationship_comments", Comment)
    # Wildcards grant but do not define
    assert not checker.supports("remove_from_comments", Article)
    assert not checker.supports("allow_relationship_tags", Article)


def test_permitted_actions(policy_config):
    checker = SimpleRBACPermissionChecker(policy_config, roles=["viewer", "editor"])
    assert checker.permitted_actions(Article()) == [
        "allow_relationship_comments",
        "index",
        "show",
        "update",
    ]
    assert checker.permitted_actions(Comment()) == ["index", "show"]


def test_denial_logged_as_warning(policy_config, caplog):
    checker = SimpleRBACPermissionChecker(policy_config, roles=["viewer"])
    with caplog.at_level(logging.WARNING):
        checker.check("destroy", Article())
    assert "DENIED" in caplog.text
    assert "destroy" in caplog.text


def test_authorizer_with_rbac_relationship_fallback(policy_config):
    article = Article(id=1)

    editor = Authorizer(SimpleRBACPermissionChecker(policy_config, roles=["editor"]))
    editor.create_to_many_relationship(article, [Comment()], "comments")
    editor.create_to_many_relationship(article, [Tag()], "tags")

    viewer = Authorizer(SimpleRBACPermissionChecker(policy_config, roles=["viewer"]))
    with pytest.raises(AuthorizationDenied) as exc_info:
        viewer.create_to_many_relationship(article, [Comment()], "comments")
    assert exc_info.value.action == "allow_relationship_comments"
