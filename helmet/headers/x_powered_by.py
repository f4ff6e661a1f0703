"""X-Powered-By: remove (or disguise) the server technology banner."""

from typing import Any

from helmet.schemas.options import HidePoweredByOptions, parse_options
from helmet.types import Middleware, Next


def x_powered_by(options: Any = None) -> Middleware:
    opts = parse_options(HidePoweredByOptions, options, feature="hide_powered_by")
    set_to = opts.set_to

    def x_powered_by_middleware(request: Any, response: Any, call_next: Next) -> None:
        if set_to:
            response.headers["X-Powered-By"] = set_to
        elif "X-Powered-By" in response.headers:
            del response.headers["X-Powered-By"]
        call_next()

    return x_powered_by_middleware
