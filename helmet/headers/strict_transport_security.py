"""Strict-Transport-Security: keep browsers on HTTPS."""

from typing import Any

from helmet.schemas.options import HstsOptions, parse_options
from helmet.types import Middleware, Next


def strict_transport_security(options: Any = None) -> Middleware:
    """Build the HSTS middleware.

    ``set_if(request, response)`` may be given to decide per request whether
    the header is written at all.
    """
    opts = parse_options(HstsOptions, options, feature="hsts")
    directives = [f"max-age={opts.max_age}"]
    if opts.include_sub_domains:
        directives.append("includeSubDomains")
    if opts.preload:
        directives.append("preload")
    value = "; ".join(directives)
    set_if = opts.set_if

    def strict_transport_security_middleware(request: Any, response: Any, call_next: Next) -> None:
        if set_if is None or set_if(request, response):
            response.headers["Strict-Transport-Security"] = value
        call_next()

    return strict_transport_security_middleware
