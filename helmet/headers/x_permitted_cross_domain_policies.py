"""X-Permitted-Cross-Domain-Policies: cross-domain policy for Adobe clients."""

from typing import Any

from helmet.schemas.options import PermittedCrossDomainPoliciesOptions, parse_options
from helmet.types import Middleware, Next


def x_permitted_cross_domain_policies(options: Any = None) -> Middleware:
    opts = parse_options(
        PermittedCrossDomainPoliciesOptions, options, feature="permitted_cross_domain_policies"
    )
    value = opts.permitted_policies

    def x_permitted_cross_domain_policies_middleware(
        request: Any, response: Any, call_next: Next
    ) -> None:
        response.headers["X-Permitted-Cross-Domain-Policies"] = value
        call_next()

    return x_permitted_cross_domain_policies_middleware
