"""X-DNS-Prefetch-Control: opt in or out of browser DNS prefetching."""

from typing import Any

from helmet.schemas.options import DnsPrefetchControlOptions, parse_options
from helmet.types import Middleware, Next


def x_dns_prefetch_control(options: Any = None) -> Middleware:
    opts = parse_options(DnsPrefetchControlOptions, options, feature="dns_prefetch_control")
    value = "on" if opts.allow else "off"

    def x_dns_prefetch_control_middleware(request: Any, response: Any, call_next: Next) -> None:
        response.headers["X-DNS-Prefetch-Control"] = value
        call_next()

    return x_dns_prefetch_control_middleware
