"""Feature-Policy: limit which browser features a page may use.

Deprecated: browsers have moved on to Permissions-Policy.
"""

import warnings
from typing import Any

from helmet.schemas.options import FeaturePolicyOptions, parse_options
from helmet.types import Middleware, Next


def feature_policy(options: Any = None) -> Middleware:
    warnings.warn(
        "helmet.feature_policy is deprecated and will be removed in helmet 4. "
        "Set the Feature-Policy header with your own middleware instead.",
        DeprecationWarning,
        stacklevel=2,
    )
    opts = parse_options(FeaturePolicyOptions, options, feature="feature_policy")
    value = "; ".join(
        " ".join([name, *allowlist]) for name, allowlist in opts.features.items()
    )

    def feature_policy_middleware(request: Any, response: Any, call_next: Next) -> None:
        response.headers["Feature-Policy"] = value
        call_next()

    return feature_policy_middleware
