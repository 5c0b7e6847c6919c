"""
Authorizing processor for resource API operations.

Sits in front of the handlers that perform API operations: before a
handler runs, the processor dispatches the operation to the matching
Authorizer hook with the records it concerns.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional
import logging

from resource_authz.authorizer import Authorizer
from resource_authz.domain.errors import UnsupportedOperationError


logger = logging.getLogger("resource_authz.processor")


class Operation(str, Enum):
    """API operations the processor knows how to authorize."""

    FIND = "find"
    SHOW = "show"
    SHOW_RELATIONSHIP = "show_relationship"
    SHOW_RELATED_RESOURCE = "show_related_resource"
    SHOW_RELATED_RESOURCES = "show_related_resources"
    REPLACE_FIELDS = "replace_fields"
    CREATE_RESOURCE = "create_resource"
    REMOVE_RESOURCE = "remove_resource"
    CREATE_TO_MANY_RELATIONSHIP = "create_to_many_relationship"
    REMOVE_TO_MANY_RELATIONSHIP = "remove_to_many_relationship"
    REPLACE_TO_MANY_RELATIONSHIP = "replace_to_many_relationship"
    REPLACE_TO_ONE_RELATIONSHIP = "replace_to_one_relationship"
    REMOVE_TO_ONE_RELATIONSHIP = "remove_to_one_relationship"
    INCLUDE_HAS_MANY_RESOURCE = "include_has_many_resource"
    INCLUDE_HAS_ONE_RESOURCE = "include_has_one_resource"

    def __str__(self) -> str:
        return self.value


@dataclass
class OperationRequest:
    """
    An API operation about to be performed.

    Attributes:
        operation: Which operation (an Operation or its string value)
        source: Source record (or record class for find/create_resource)
        related: Single related record (show_relationship, to-one changes, includes)
        related_records: Related records (field replacement, to-many changes)
        relation: Relationship name for relationship operations
        record_class: Related record class for include_has_many_resource
    """

    operation: Operation
    source: Any = None
    related: Any = None
    related_records: list[Any] = field(default_factory=list)
    relation: Optional[str] = None
    record_class: Optional[type] = None


class AuthorizingProcessor:
    """
    Dispatches OperationRequests to Authorizer hooks.

    Example usage:
    ```python
    processor = AuthorizingProcessor(authorizer)

    handler = processor.apply(
        repository.delete,
        OperationRequest(Operation.REMOVE_RESOURCE, source=article),
    )
    handler(article)  # raises AuthorizationDenied before delete runs
    ```
    """

    def __init__(self, authorizer: Authorizer):
        self.authorizer = authorizer
        self._dispatch: dict[Operation, Callable[[OperationRequest], None]] = {
            Operation.FIND: lambda r: self.authorizer.find(r.source),
            Operation.SHOW: lambda r: self.authorizer.show(r.source),
            Operation.SHOW_RELATIONSHIP: lambda r: self.authorizer.show_relationship(
                r.source, r.related
            ),
            Operation.SHOW_RELATED_RESOURCE: lambda r: (
                self.authorizer.show_related_resource(r.source, r.related)
            ),
            Operation.SHOW_RELATED_RESOURCES: lambda r: (
                self.authorizer.show_related_resources(r.source)
            ),
            Operation.REPLACE_FIELDS: lambda r: self.authorizer.replace_fields(
                r.source, r.related_records
            ),
            Operation.CREATE_RESOURCE: lambda r: self.authorizer.create_resource(
                r.source, r.related_records
            ),
            Operation.REMOVE_RESOURCE: lambda r: self.authorizer.remove_resource(
                r.source
            ),
            Operation.CREATE_TO_MANY_RELATIONSHIP: lambda r: (
                self.authorizer.create_to_many_relationship(
                    r.source, r.related_records, self._relation(r)
                )
            ),
            Operation.REMOVE_TO_MANY_RELATIONSHIP: lambda r: (
                self.authorizer.remove_to_many_relationship(
                    r.source, r.related_records, self._relation(r)
                )
            ),
            Operation.REPLACE_TO_MANY_RELATIONSHIP: lambda r: (
                self.authorizer.replace_to_many_relationship(
                    r.source, r.related_records, self._relation(r)
                )
            ),
            Operation.REPLACE_TO_ONE_RELATIONSHIP: lambda r: (
                self.authorizer.replace_to_one_relationship(
                    r.source, r.related, self._relation(r)
                )
            ),
            Operation.REMOVE_TO_ONE_RELATIONSHIP: lambda r: (
                self.authorizer.remove_to_one_relationship(
                    r.source, self._relation(r)
                )
            ),
            Operation.INCLUDE_HAS_MANY_RESOURCE: lambda r: (
                self.authorizer.include_has_many_resource(r.source, r.record_class)
            ),
            Operation.INCLUDE_HAS_ONE_RESOURCE: lambda r: (
                self.authorizer.include_has_one_resource(r.source, r.related)
            ),
        }

    @staticmethod
    def _relation(request: OperationRequest) -> str:
        if not request.relation:
            raise UnsupportedOperationError(
                f"Operation '{request.operation}' requires a relation name",
                details={"operation": str(request.operation)},
            )
        return request.relation

    def authorize(self, request: OperationRequest) -> None:
        """Run the authorizer hook for a request; raises AuthorizationDenied."""
        try:
            operation = Operation(request.operation)
        except ValueError:
            raise UnsupportedOperationError(
                f"Unsupported operation '{request.operation}'",
                details={"operation": str(request.operation)},
            ) from None

        logger.debug("Authorizing %s", operation.value)
        self._dispatch[operation](request)

    def apply(self, handler_func: Callable, request: OperationRequest) -> Callable:
        """Wrap handler so the request is authorized before it runs."""

        def wrapped(*args, **kwargs) -> Any:
            self.authorize(request)
            return handler_func(*args, **kwargs)

        return wrapped


def authorize_operation(
    operation: Operation | str,
    source: Any = None,
    related: Any = None,
    related_records: Optional[list[Any]] = None,
    relation: Optional[str] = None,
    record_class: Optional[type] = None,
) -> OperationRequest:
    """
    Convenience function to create an OperationRequest.

    Example:
    ```python
    request = authorize_operation(
        "create_to_many_relationship",
        source=article,
        related_records=[comment],
        relation="comments",
    )
    processor.authorize(request)
    ```
    """
    return OperationRequest(
        operation=operation,
        source=source,
        related=related,
        related_records=related_records or [],
        relation=relation,
        record_class=record_class,
    )
