"""Content-Security-Policy: restrict where a page may load resources from."""

from __future__ import annotations

from typing import Any

from helmet.core.exceptions import HelmetError
from helmet.schemas.options import ContentSecurityPolicyOptions, parse_options
from helmet.types import Middleware, Next


def content_security_policy(options: Any = None) -> Middleware:
    """Build a middleware that writes the Content-Security-Policy header.

    Directive sources may be callables taking ``(request, response)``; they
    are evaluated on every request, which allows per-request nonces. A
    callable returning a non-string, or a string holding ``;`` or ``,``, is
    handed to ``call_next`` as a ``HelmetError`` and no header is written.
    """
    opts = parse_options(ContentSecurityPolicyOptions, options, feature="content_security_policy")
    header_name = (
        "Content-Security-Policy-Report-Only" if opts.report_only else "Content-Security-Policy"
    )
    directives = tuple(opts.directives.items())
    dynamic = any(callable(source) for _, sources in directives for source in sources)

    def render(request: Any, response: Any) -> str:
        parts = []
        for name, sources in directives:
            values = []
            for source in sources:
                if callable(source):
                    source = source(request, response)
                    if not isinstance(source, str) or ";" in source or "," in source:
                        raise HelmetError(f"directive {name!r} produced an invalid source {source!r}")
                values.append(source)
            parts.append(" ".join([name, *values]))
        return "; ".join(parts)

    static_value = None if dynamic else render(None, None)

    def content_security_policy_middleware(request: Any, response: Any, call_next: Next) -> None:
        if static_value is not None:
            value = static_value
        else:
            try:
                value = render(request, response)
            except HelmetError as exc:
                call_next(exc)
                return
        response.headers[header_name] = value
        call_next()

    return content_security_policy_middleware
