"""Public-Key-Pins: HTTP public key pinning.

Deprecated: pinning mistakes can lock users out of a site for ``max_age``
seconds, and browsers dropped support for the header.
"""

import warnings
from typing import Any

from helmet.schemas.options import HpkpOptions, parse_options
from helmet.types import Middleware, Next


def hpkp(options: Any = None) -> Middleware:
    warnings.warn(
        "helmet.hpkp is deprecated and will be removed in helmet 4. "
        "Set the Public-Key-Pins header with your own middleware instead.",
        DeprecationWarning,
        stacklevel=2,
    )
    opts = parse_options(HpkpOptions, options, feature="hpkp")
    header_name = "Public-Key-Pins-Report-Only" if opts.report_only else "Public-Key-Pins"
    directives = [f'pin-sha256="{pin}"' for pin in opts.sha256s]
    directives.append(f"max-age={opts.max_age}")
    if opts.include_sub_domains:
        directives.append("includeSubDomains")
    if opts.report_uri:
        directives.append(f'report-uri="{opts.report_uri}"')
    value = "; ".join(directives)
    set_if = opts.set_if

    def hpkp_middleware(request: Any, response: Any, call_next: Next) -> None:
        if set_if is None or set_if(request, response):
            response.headers[header_name] = value
        call_next()

    return hpkp_middleware
