"""Option records accepted by the individual header middlewares.

Every record is validated once, when its middleware is built, and frozen
afterwards. Keys are snake_case; unknown keys are rejected.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Callable, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from helmet.core.exceptions import HelmetConfigError

OptionsT = TypeVar("OptionsT", bound="OptionsBase")

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_kebab(name: str) -> str:
    """``defaultSrc`` / ``default_src`` / ``default-src`` -> ``default-src``."""
    return _CAMEL_BOUNDARY.sub("-", name).replace("_", "-").lower()


class OptionsBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)


class EmptyOptions(OptionsBase):
    """Record for middlewares that take no options."""
    pass


# ---------- Content-Security-Policy ----------
class ContentSecurityPolicyOptions(OptionsBase):
    directives: dict[str, Any]
    report_only: bool = False

    @field_validator("directives")
    @classmethod
    def normalize_directives(cls, value: dict[str, Any]) -> dict[str, Any]:
        if not value:
            raise ValueError("at least one directive is required")
        normalized: dict[str, Any] = {}
        for raw_name, raw_value in value.items():
            name = to_kebab(raw_name)
            if name in normalized:
                raise ValueError(f"directive {name!r} is given more than once")
            normalized[name] = cls._normalize_value(name, raw_value)
        return normalized

    @staticmethod
    def _normalize_value(name: str, value: Any) -> Any:
        # True marks a directive without sources, e.g. upgrade-insecure-requests
        if value is True:
            return ()
        if isinstance(value, str) or callable(value):
            items = [value]
        elif isinstance(value, (list, tuple)):
            items = list(value)
        else:
            raise ValueError(f"directive {name!r} must be a string, a list, True or a callable")
        for item in items:
            if callable(item):
                continue
            if not isinstance(item, str):
                raise ValueError(f"directive {name!r} contains a non-string source")
            if ";" in item or "," in item:
                raise ValueError(f"directive {name!r} contains an invalid source {item!r}")
        return tuple(items)

    @model_validator(mode="after")
    def check_report_target(self) -> "ContentSecurityPolicyOptions":
        if self.report_only and not (self.directives.keys() & {"report-uri", "report-to"}):
            raise ValueError("report_only requires a report-uri or report-to directive")
        return self


# ---------- X-DNS-Prefetch-Control ----------
class DnsPrefetchControlOptions(OptionsBase):
    allow: bool = False


# ---------- Expect-CT ----------
class ExpectCtOptions(OptionsBase):
    max_age: int = Field(0, ge=0)
    enforce: bool = False
    report_uri: str | None = None


# ---------- Feature-Policy ----------
class FeaturePolicyOptions(OptionsBase):
    features: dict[str, list[str]]

    @field_validator("features")
    @classmethod
    def normalize_features(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        if not value:
            raise ValueError("at least one feature is required")
        normalized: dict[str, list[str]] = {}
        for raw_name, allowlist in value.items():
            if not allowlist:
                raise ValueError(f"feature {raw_name!r} needs at least one allowed origin")
            normalized[to_kebab(raw_name)] = list(allowlist)
        return normalized


# ---------- X-Frame-Options ----------
class FrameguardOptions(OptionsBase):
    action: str = "sameorigin"
    domain: str | None = None

    @field_validator("action")
    @classmethod
    def normalize_action(cls, value: str) -> str:
        action = value.lower()
        if action == "same-origin":
            action = "sameorigin"
        if action not in {"deny", "sameorigin", "allow-from"}:
            raise ValueError('action must be "deny", "sameorigin" or "allow-from"')
        return action

    @model_validator(mode="after")
    def check_domain(self) -> "FrameguardOptions":
        if self.action == "allow-from" and not self.domain:
            raise ValueError('action "allow-from" requires a domain')
        return self


# ---------- X-Powered-By ----------
class HidePoweredByOptions(OptionsBase):
    set_to: str | None = None


# ---------- Public-Key-Pins ----------
class HpkpOptions(OptionsBase):
    max_age: int = Field(..., gt=0)
    sha256s: list[str] = Field(..., min_length=2)
    include_sub_domains: bool = False
    report_uri: str | None = None
    report_only: bool = False
    set_if: Callable[..., bool] | None = None

    @model_validator(mode="after")
    def check_report_uri(self) -> "HpkpOptions":
        if self.report_only and not self.report_uri:
            raise ValueError("report_only requires a report_uri")
        return self


# ---------- Strict-Transport-Security ----------
class HstsOptions(OptionsBase):
    # 180 days
    max_age: int = Field(15552000, ge=0)
    include_sub_domains: bool = True
    preload: bool = False
    set_if: Callable[..., bool] | None = None


# ---------- X-Permitted-Cross-Domain-Policies ----------
class PermittedCrossDomainPoliciesOptions(OptionsBase):
    permitted_policies: Literal["none", "master-only", "by-content-type", "all"] = "none"


# ---------- Referrer-Policy ----------
REFERRER_POLICY_TOKENS = frozenset(
    {
        "no-referrer",
        "no-referrer-when-downgrade",
        "same-origin",
        "origin",
        "strict-origin",
        "origin-when-cross-origin",
        "strict-origin-when-cross-origin",
        "unsafe-url",
        "",
    }
)


class ReferrerPolicyOptions(OptionsBase):
    policy: str | list[str] = Field("no-referrer", validate_default=True)

    @field_validator("policy")
    @classmethod
    def validate_policy(cls, value: str | list[str]) -> list[str]:
        tokens = [value] if isinstance(value, str) else list(value)
        if not tokens:
            raise ValueError("policy must contain at least one token")
        seen: set[str] = set()
        for token in tokens:
            if token not in REFERRER_POLICY_TOKENS:
                raise ValueError(f"{token!r} is not a valid referrer policy")
            if token in seen:
                raise ValueError(f"{token!r} is given more than once")
            seen.add(token)
        return tokens


# ---------- X-XSS-Protection ----------
class XssFilterOptions(OptionsBase):
    mode: Literal["block"] | None = "block"
    report_uri: str | None = None
    set_on_old_ie: bool = False


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"]) or "options"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


def parse_options(model: type[OptionsT], options: Any, *, feature: str) -> OptionsT:
    """Validate an options record for ``feature`` into a frozen ``model``."""
    if options is None:
        options = {}
    if isinstance(options, model):
        return options
    if not isinstance(options, Mapping):
        raise HelmetConfigError(
            f"{feature} expects a mapping of options, got {type(options).__name__}"
        )
    try:
        return model.model_validate(dict(options))
    except ValidationError as exc:
        raise HelmetConfigError(f"Invalid {feature} options: {_describe(exc)}") from exc
