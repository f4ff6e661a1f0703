"""Disable client side caching.

Deprecated: caching policy belongs to the application, not to helmet.
"""

import warnings
from typing import Any

from helmet.schemas.options import EmptyOptions, parse_options
from helmet.types import Middleware, Next

NO_CACHE_HEADERS = (
    ("Surrogate-Control", "no-store"),
    ("Cache-Control", "no-store, no-cache, must-revalidate, proxy-revalidate"),
    ("Pragma", "no-cache"),
    ("Expires", "0"),
)


def no_cache(options: Any = None) -> Middleware:
    warnings.warn(
        "helmet.no_cache is deprecated and will be removed in helmet 4. "
        "Set Cache-Control with your own middleware instead.",
        DeprecationWarning,
        stacklevel=2,
    )
    parse_options(EmptyOptions, options, feature="no_cache")

    def no_cache_middleware(request: Any, response: Any, call_next: Next) -> None:
        for name, value in NO_CACHE_HEADERS:
            response.headers[name] = value
        call_next()

    return no_cache_middleware
