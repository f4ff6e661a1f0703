"""X-Frame-Options: clickjacking protection."""

from typing import Any

from helmet.schemas.options import FrameguardOptions, parse_options
from helmet.types import Middleware, Next


def x_frame_options(options: Any = None) -> Middleware:
    opts = parse_options(FrameguardOptions, options, feature="frameguard")
    if opts.action == "allow-from":
        value = f"ALLOW-FROM {opts.domain}"
    else:
        value = opts.action.upper()

    def x_frame_options_middleware(request: Any, response: Any, call_next: Next) -> None:
        response.headers["X-Frame-Options"] = value
        call_next()

    return x_frame_options_middleware
