"""X-XSS-Protection: legacy reflected-XSS filter."""

import re
from typing import Any

from helmet.schemas.options import XssFilterOptions, parse_options
from helmet.types import Middleware, Next

_MSIE_VERSION = re.compile(r"msie\s*(\d+)", re.IGNORECASE)


def is_old_ie(user_agent: str | None) -> bool:
    """True for Internet Explorer below 9, whose XSS filter opens its own holes."""
    if not user_agent:
        return False
    match = _MSIE_VERSION.search(user_agent)
    return bool(match) and int(match.group(1)) < 9


def x_xss_protection(options: Any = None) -> Middleware:
    opts = parse_options(XssFilterOptions, options, feature="xss_filter")
    directives = ["1"]
    if opts.mode == "block":
        directives.append("mode=block")
    if opts.report_uri:
        directives.append(f"report={opts.report_uri}")
    value = "; ".join(directives)
    set_on_old_ie = opts.set_on_old_ie

    def x_xss_protection_middleware(request: Any, response: Any, call_next: Next) -> None:
        if not set_on_old_ie and is_old_ie(request.headers.get("user-agent")):
            response.headers["X-XSS-Protection"] = "0"
        else:
            response.headers["X-XSS-Protection"] = value
        call_next()

    return x_xss_protection_middleware
