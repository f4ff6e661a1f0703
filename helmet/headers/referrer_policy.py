"""Referrer-Policy: control what the Referer header carries."""

from typing import Any

from helmet.schemas.options import ReferrerPolicyOptions, parse_options
from helmet.types import Middleware, Next


def referrer_policy(options: Any = None) -> Middleware:
    opts = parse_options(ReferrerPolicyOptions, options, feature="referrer_policy")
    # browsers pick the last token they understand
    value = ",".join(opts.policy)

    def referrer_policy_middleware(request: Any, response: Any, call_next: Next) -> None:
        response.headers["Referrer-Policy"] = value
        call_next()

    return referrer_policy_middleware
