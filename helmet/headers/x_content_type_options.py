"""X-Content-Type-Options: stop browsers from MIME-sniffing responses."""

from typing import Any

from helmet.schemas.options import EmptyOptions, parse_options
from helmet.types import Middleware, Next


def x_content_type_options(options: Any = None) -> Middleware:
    parse_options(EmptyOptions, options, feature="no_sniff")

    def x_content_type_options_middleware(request: Any, response: Any, call_next: Next) -> None:
        response.headers["X-Content-Type-Options"] = "nosniff"
        call_next()

    return x_content_type_options_middleware
