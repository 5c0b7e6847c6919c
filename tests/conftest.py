"""
Pytest configuration for py-resource-authz tests.
"""

from typing import Any

import pytest

from resource_authz.config import reset_config
from resource_authz.domain.value_objects import subject_type
from resource_authz.identity import clear_identity


# -----------------------------------------------------------------------------
# FAKE CHECKER
# -----------------------------------------------------------------------------


class FakePermissionChecker:
    """
    In-memory checker with explicit allow/disallow stubs.

    Checks that were never stubbed raise, so a test fails loudly if the
    authorizer queries something unexpected.
    """

    def __init__(self):
        self.decisions: dict[tuple[str, int], bool] = {}
        self.defined: set[tuple[str, type]] = set()
        self.calls: list[tuple[str, Any]] = []

    def allow_action(self, action: str, subject: Any) -> None:
        self.decisions[(action, id(subject))] = True

    def disallow_action(self, action: str, subject: Any) -> None:
        self.decisions[(action, id(subject))] = False

    def define_action(self, action: str, record_class: type) -> None:
        self.defined.add((action, record_class))

    def check(self, action: str, subject: Any) -> bool:
        self.calls.append((action, subject))
        key = (action, id(subject))
        if key not in self.decisions:
            raise AssertionError(f"Unexpected check: {action} on {subject!r}")
        return self.decisions[key]

    def supports(self, action: str, record_class: type) -> bool:
        return (action, subject_type(record_class)) in self.defined


@pytest.fixture
def checker():
    return FakePermissionChecker()


@pytest.fixture(autouse=True)
def _reset_state():
    reset_config()
    clear_identity()
    yield
    reset_config()
    clear_identity()
