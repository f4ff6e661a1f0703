"""Individual header-setting middlewares."""

from .content_security_policy import content_security_policy
from .expect_ct import expect_ct
from .feature_policy import feature_policy
from .hpkp import hpkp
from .no_cache import no_cache
from .referrer_policy import referrer_policy
from .strict_transport_security import strict_transport_security
from .x_content_type_options import x_content_type_options
from .x_dns_prefetch_control import x_dns_prefetch_control
from .x_download_options import x_download_options
from .x_frame_options import x_frame_options
from .x_permitted_cross_domain_policies import x_permitted_cross_domain_policies
from .x_powered_by import x_powered_by
from .x_xss_protection import x_xss_protection

__all__ = [
    "content_security_policy",
    "expect_ct",
    "feature_policy",
    "hpkp",
    "no_cache",
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
