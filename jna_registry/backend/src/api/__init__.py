"""Public API routers exposed by the FastAPI application."""

from . import health, methods, register, search

__all__ = [
    "health",
    "methods",
    "register",
    "search",
]
