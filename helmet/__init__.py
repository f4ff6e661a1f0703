"""Security header middlewares behind a single ``helmet()`` entry point."""

from helmet.composer import helmet
from helmet.core.exceptions import HelmetConfigError, HelmetError, RequestPassedAsConfigError
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

# Short names for the header middlewares, matching the config keys.
dns_prefetch_control = x_dns_prefetch_control
frameguard = x_frame_options
hide_powered_by = x_powered_by
hsts = strict_transport_security
ie_no_open = x_download_options
no_sniff = x_content_type_options
permitted_cross_domain_policies = x_permitted_cross_domain_policies
xss_filter = x_xss_protection

__all__ = [
    "HelmetConfigError",
    "HelmetError",
    "RequestPassedAsConfigError",
    "content_security_policy",
    "dns_prefetch_control",
    "expect_ct",
    "feature_policy",
    "frameguard",
    "helmet",
    "hide_powered_by",
    "hpkp",
    "hsts",
    "ie_no_open",
    "no_cache",
    "no_sniff",
    "permitted_cross_domain_policies",
    "referrer_policy",
    "strict_transport_security",
    "x_content_type_options",
    "x_dns_prefetch_control",
    "x_download_options",
    "x_frame_options",
    "x_permitted_cross_domain_policies",
    "x_powered_by",
    "x_xss_protection",
]
