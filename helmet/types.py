"""Shared callable shapes for helmet middleware."""

from typing import Any, Callable

# call_next() on success, call_next(error) on failure
Next = Callable[..., None]

# (request, response, call_next); request exposes headers and method,
# response exposes a mutable headers mapping
Middleware = Callable[[Any, Any, Next], None]

MiddlewareFactory = Callable[..., Middleware]
