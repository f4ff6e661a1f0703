"""The fixed, ordered table of features ``helmet()`` knows how to compose."""

from __future__ import annotations

from typing import NamedTuple

from helmet.headers import (
    content_security_policy,
    expect_ct,
    feature_policy,
    hpkp,
    no_cache,
    referrer_policy,
    strict_transport_security,
    x_content_type_options,
    x_dns_prefetch_control,
    x_download_options,
    x_frame_options,
    x_permitted_cross_domain_policies,
    x_powered_by,
    x_xss_protection,
)
from helmet.types import MiddlewareFactory


class Feature(NamedTuple):
    name: str
    default: bool
    factory: MiddlewareFactory


# Order here is the order middlewares run in, whatever order the config uses.
FEATURES: tuple[Feature, ...] = (
    Feature("content_security_policy", False, content_security_policy),
    Feature("dns_prefetch_control", True, x_dns_prefetch_control),
    Feature("expect_ct", False, expect_ct),
    Feature("feature_policy", False, feature_policy),
    Feature("frameguard", True, x_frame_options),
    Feature("hide_powered_by", True, x_powered_by),
    Feature("hpkp", False, hpkp),
    Feature("hsts", True, strict_transport_security),
    Feature("ie_no_open", True, x_download_options),
    Feature("no_cache", False, no_cache),
    Feature("no_sniff", True, x_content_type_options),
    Feature("permitted_cross_domain_policies", False, x_permitted_cross_domain_policies),
    Feature("referrer_policy", False, referrer_policy),
    Feature("xss_filter", True, x_xss_protection),
)

FEATURE_NAMES = frozenset(feature.name for feature in FEATURES)

DEFAULT_FEATURES = tuple(feature.name for feature in FEATURES if feature.default)
