"""
Exception handlers for FastAPI.

Maps authorization domain errors to HTTP responses.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from resource_authz.domain.errors import (
    AuthzDomainError,
    AuthorizationDenied,
)


async def authorization_denied_handler(request: Request, exc: AuthorizationDenied):
    """Handle AuthorizationDenied (403)."""
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content={"error": exc.code, "message": exc.message, "details": exc.details},
    )


async def domain_error_handler(request: Request, exc: Exception):
    """Handle checker misconfiguration and other domain errors (500)."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": getattr(exc, "code", "INTERNAL_ERROR"),
            "message": "Authorization is misconfigured",
        },
    )


def register_exception_handlers(app):
    """
    Register uniform exception handlers for the FastAPI app.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(AuthorizationDenied, authorization_denied_handler)
    app.add_exception_handler(AuthzDomainError, domain_error_handler)
