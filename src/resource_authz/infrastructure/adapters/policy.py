"""
Policy Object Permission Checker.

One policy class per record type, instantiated with the current user
and the record (or record class) being authorized. Rules are declared
explicitly with the ``rule`` decorator, so the set of defined actions
is known when the class is created.

Usage:
    class ArticlePolicy(Policy):
        @rule("show")
        def can_show(self) -> bool:
            return True

        @rule("allow_relationship_comments")
        def can_comment(self) -> bool:
            return self.user.is_authenticated

    checker = PolicyPermissionChecker({Article: ArticlePolicy})
"""

from typing import Any, Callable, ClassVar, Dict, Optional
import logging

from resource_authz.domain.errors import ActionNotDefinedError, PolicyNotDefinedError
from resource_authz.domain.value_objects import Action, subject_name, subject_type
from resource_authz.identity import get_identity
from resource_authz.infrastructure.ports.permission_checker import (
    PermissionCheckerPort,
)

logger = logging.getLogger(__name__)

_RULE_ATTR = "__policy_rule__"


def rule(action: str) -> Callable[[Callable[..., bool]], Callable[..., bool]]:
    """Mark a policy method as the rule for an action."""

    def decorator(func: Callable[..., bool]) -> Callable[..., bool]:
        setattr(func, _RULE_ATTR, str(action))
        return func

    return decorator


class Policy:
    """
    Base policy. Denies every generic action unless a subclass overrides it.
    """

    rules: ClassVar[Dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        collected: Dict[str, str] = {}
        for klass in reversed(cls.__mro__):
            for name, value in vars(klass).items():
                action = getattr(value, _RULE_ATTR, None)
                if action is not None:
                    collected[action] = name
        cls.rules = collected

    def __init__(self, user: Any, record: Any):
        self.user = user
        self.record = record

    @rule(Action.INDEX)
    def index(self) -> bool:
        return False

    @rule(Action.SHOW)
    def show(self) -> bool:
        return False

    @rule(Action.CREATE)
    def create(self) -> bool:
        return False

    @rule(Action.UPDATE)
    def update(self) -> bool:
        return False

    @rule(Action.DESTROY)
    def destroy(self) -> bool:
        return False

    @classmethod
    def defines(cls, action: str) -> bool:
        return str(action) in cls.rules

    def permits(self, action: str) -> bool:
        method_name = self.rules.get(str(action))
        if method_name is None:
            raise ActionNotDefinedError(
                f"{type(self).__name__} has no rule for '{action}'",
                details={"policy": type(self).__name__, "action": str(action)},
            )
        return bool(getattr(self, method_name)())


# Rules of the base class itself (subclasses collect theirs on creation)
Policy.rules = {
    str(action): action.value
    for action in (
        Action.INDEX,
        Action.SHOW,
        Action.CREATE,
        Action.UPDATE,
        Action.DESTROY,
    )
}


class PolicyPermissionChecker(PermissionCheckerPort):
    """
    Permission checker backed by policy classes.

    Policies are resolved from the registry first, then from a
    ``policy_class`` attribute on the record class, walking the MRO so
    subclasses of a registered record share its policy.
    """

    def __init__(
        self,
        policies: Optional[Dict[type, type[Policy]]] = None,
        user_resolver: Optional[Callable[[], Any]] = None,
    ):
        self.policies: Dict[type, type[Policy]] = dict(policies or {})
        self.user_resolver = user_resolver or get_identity

    def register(self, record_class: type, policy_class: type[Policy]) -> None:
        """Register the policy used for a record class."""
        self.policies[record_class] = policy_class

    def _find_policy(self, record_class: type) -> Optional[type[Policy]]:
        for klass in record_class.__mro__:
            if klass in self.policies:
                return self.policies[klass]
        return getattr(record_class, "policy_class", None)

    def policy_for(self, subject: Any) -> type[Policy]:
        """Resolve the policy class for a subject or raise PolicyNotDefinedError."""
        record_class = subject_type(subject)
        policy_class = self._find_policy(record_class)
        if policy_class is None:
            raise PolicyNotDefinedError(
                f"Unable to find policy for {record_class.__name__}",
                details={"resource_type": subject_name(subject)},
            )
        return policy_class

    def check(self, action: str, subject: Any) -> bool:
        policy_class = self.policy_for(subject)
        allowed = policy_class(self.user_resolver(), subject).permits(action)
        logger.debug(
            "Policy %s: %s on %s -> %s",
            policy_class.__name__,
            action,
            subject_name(subject),
            "ALLOWED" if allowed else "DENIED",
        )
        return allowed

    def supports(self, action: str, subject_type: type) -> bool:
        policy_class = self._find_policy(subject_type)
        return policy_class is not None and policy_class.defines(action)
