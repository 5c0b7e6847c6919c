"""
Authorizer for resource API operations.

Translates each API lifecycle hook (find, show, create, relationship
changes, includes) into permission queries against a
PermissionCheckerPort, raising AuthorizationDenied on the first denied
check.

Example usage:
```python
from resource_authz import Authorizer
from resource_authz.infrastructure.adapters import SimpleRBACPermissionChecker

authorizer = Authorizer(
    SimpleRBACPermissionChecker({"viewer": ["index", "show"]}, roles=["viewer"])
)
authorizer.show(article)  # passes
authorizer.remove_resource(article)  # raises AuthorizationDenied
```
"""

from typing import Any, Iterable, Optional
import logging

from resource_authz.config import AuthorizerConfig, get_config
from resource_authz.domain.errors import AuthorizationDenied
from resource_authz.domain.value_objects import (
    Action,
    relationship_action,
    subject_name,
    subject_type,
)
from resource_authz.infrastructure.ports.permission_checker import (
    PermissionCheckerPort,
)


logger = logging.getLogger(__name__)


class Authorizer:
    """
    Maps API operations to permission checks.

    Every operation returns None when all of its checks pass and raises
    AuthorizationDenied for the first denied check; checks after a
    denial are not run. Errors raised by the checker propagate as-is.
    """

    def __init__(
        self,
        checker: PermissionCheckerPort,
        config: Optional[AuthorizerConfig] = None,
    ):
        self.checker = checker
        self.config = config or get_config()

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def find(self, record_class: Any) -> None:
        """Listing records requires ``index`` on the record type."""
        self._authorize(Action.INDEX, subject_type(record_class))

    def show(self, record: Any) -> None:
        self._authorize(Action.SHOW, record)

    def show_relationship(self, source_record: Any, related_record: Any) -> None:
        """Requires ``show`` on the source and, when present, on the related record."""
        self._authorize(Action.SHOW, source_record)
        if related_record is not None:
            self._authorize(Action.SHOW, related_record)

    def show_related_resource(self, source_record: Any, related_record: Any) -> None:
        self.show_relationship(source_record, related_record)

    def show_related_resources(self, source_record: Any) -> None:
        self._authorize(Action.SHOW, source_record)

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def replace_fields(
        self, source_record: Any, related_records: Optional[Iterable[Any]]
    ) -> None:
        """Requires ``update`` on the source and on every related record."""
        self._authorize(Action.UPDATE, source_record)
        self._authorize_all(Action.UPDATE, related_records)

    def create_resource(
        self, source_class: Any, related_records: Optional[Iterable[Any]]
    ) -> None:
        """Requires ``create`` on the type and ``update`` on every related record."""
        self._authorize(Action.CREATE, subject_type(source_class))
        self._authorize_all(Action.UPDATE, related_records)

    def remove_resource(self, record: Any) -> None:
        self._authorize(Action.DESTROY, record)

    # ------------------------------------------------------------------
    # Relationship operations
    # ------------------------------------------------------------------

    def create_to_many_relationship(
        self, source_record: Any, new_related_records: Iterable[Any], relation: str
    ) -> None:
        """Requires ``allow_relationship_<relation>`` if defined, else ``update``."""
        action = self._relationship_action(
            self.config.add_relationship_prefix, relation, source_record
        )
        self._authorize(action, source_record)

    def remove_to_many_relationship(
        self, source_record: Any, related_records: Iterable[Any], relation: str
    ) -> None:
        """Requires ``remove_from_<relation>`` if defined, else ``update``."""
        action = self._relationship_action(
            self.config.remove_relationship_prefix, relation, source_record
        )
        self._authorize(action, source_record)

    def replace_to_many_relationship(
        self, source_record: Any, new_related_records: Iterable[Any], relation: str
    ) -> None:
        action = self._relationship_action(
            self.config.replace_relationship_prefix, relation, source_record
        )
        self._authorize(action, source_record)

    def replace_to_one_relationship(
        self, source_record: Any, new_related_record: Any, relation: str
    ) -> None:
        """
        Requires ``replace_<relation>`` if defined (else ``update``) on the
        source, and ``show`` on the new related record when one is given.
        """
        action = self._relationship_action(
            self.config.replace_relationship_prefix, relation, source_record
        )
        self._authorize(action, source_record)
        if new_related_record is not None:
            self._authorize(Action.SHOW, new_related_record)

    def remove_to_one_relationship(self, source_record: Any, relation: str) -> None:
        action = self._relationship_action(
            self.config.remove_to_one_prefix, relation, source_record
        )
        self._authorize(action, source_record)

    # ------------------------------------------------------------------
    # Includes
    # ------------------------------------------------------------------

    def include_has_many_resource(self, source_record: Any, record_class: Any) -> None:
        self._authorize(Action.INDEX, subject_type(record_class))

    def include_has_one_resource(self, source_record: Any, related_record: Any) -> None:
        self._authorize(Action.SHOW, related_record)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _relationship_action(self, prefix: str, relation: str, source_record: Any) -> str:
        """Relation-specific action if the checker defines it, else ``update``."""
        action = relationship_action(prefix, str(relation))
        if self.checker.supports(action, subject_type(source_record)):
            return action
        return Action.UPDATE.value

    def _authorize_all(self, action: str, records: Optional[Iterable[Any]]) -> None:
        if records is None:
            return
        for record in records:
            self._authorize(action, record)

    def _authorize(self, action: str, subject: Any) -> None:
        action = str(action)
        allowed = self.checker.check(action, subject)

        if self.config.log_decisions:
            logger.debug(
                "Authz check: %s | Action: %s | Resource: %s",
                "ALLOWED" if allowed else "DENIED",
                action,
                subject_name(subject),
            )

        if not allowed:
            if self.config.log_decisions:
                logger.warning(
                    "Access denied: %s on %s", action, subject_name(subject)
                )
            raise AuthorizationDenied(
                action, subject, message=self.config.denied_message
            )
