"""FastAPI integration: maps authorization errors to HTTP responses."""

from resource_authz.contrib.fastapi.exception_handlers import (
    authorization_denied_handler,
    domain_error_handler,
    register_exception_handlers,
)

__all__ = [
    "authorization_denied_handler",
    "domain_error_handler",
    "register_exception_handlers",
]
