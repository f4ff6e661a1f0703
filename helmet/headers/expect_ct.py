"""Expect-CT: ask browsers to enforce Certificate Transparency."""

from typing import Any

from helmet.schemas.options import ExpectCtOptions, parse_options
from helmet.types import Middleware, Next


def expect_ct(options: Any = None) -> Middleware:
    opts = parse_options(ExpectCtOptions, options, feature="expect_ct")
    directives = [f"max-age={opts.max_age}"]
    if opts.enforce:
        directives.append("enforce")
    if opts.report_uri:
        directives.append(f'report-uri="{opts.report_uri}"')
    value = ", ".join(directives)

    def expect_ct_middleware(request: Any, response: Any, call_next: Next) -> None:
        response.headers["Expect-CT"] = value
        call_next()

    return expect_ct_middleware
