"""X-Download-Options: stop old Internet Explorer from opening downloads in the site's context."""

from typing import Any

from helmet.schemas.options import EmptyOptions, parse_options
from helmet.types import Middleware, Next


def x_download_options(options: Any = None) -> Middleware:
    parse_options(EmptyOptions, options, feature="ie_no_open")

    def x_download_options_middleware(request: Any, response: Any, call_next: Next) -> None:
        response.headers["X-Download-Options"] = "noopen"
        call_next()

    return x_download_options_middleware
