"""ASGI middleware for Starlette and FastAPI applications."""

from .security_headers import SecurityHeadersMiddleware

__all__ = [
    "SecurityHeadersMiddleware",
]
