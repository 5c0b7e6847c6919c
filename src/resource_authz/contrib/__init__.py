# ruff: noqa: E402, F401
"""
Contrib modules for framework and library integrations.

Available integrations (installed conditionally based on dependencies):
- dependency_injector: AuthzContainer for DI
- fastapi: Exception handlers for FastAPI
"""

# Conditional imports based on installed packages

__all__ = []

# Dependency Injector integration
try:
    from resource_authz.contrib.dependency_injector import AuthzContainer

    HAS_DEPENDENCY_INJECTOR = True
    __all__.append("AuthzContainer")
except ImportError:
    HAS_DEPENDENCY_INJECTOR = False
    AuthzContainer = None

# FastAPI integration
try:
    import fastapi
    from resource_authz.contrib.fastapi import register_exception_handlers

    HAS_FASTAPI = True
    __all__.append("register_exception_handlers")
except ImportError:
    HAS_FASTAPI = False
