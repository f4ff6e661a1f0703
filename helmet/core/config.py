"""Environment-driven settings for helmet."""

from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from helmet.core.exceptions import HelmetConfigError


_ENV_FILE = Path.cwd() / ".env"


class Settings(BaseSettings):
    """Settings loaded from ``HELMET_*`` environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="HELMET_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    # --- Feature toggles (comma separated feature names) ---
    DISABLED_FEATURES: str = ""
    ENABLED_FEATURES: str = ""

    # --- Option overrides ---
    HSTS_MAX_AGE: int | None = Field(default=None, ge=0)
    FRAME_OPTIONS_ACTION: str | None = None
    REFERRER_POLICY: str | None = None

    @staticmethod
    def _split_list(value: str | None) -> list[str]:
        if not value:
            return []
        return [item.strip() for item in value.split(",") if item.strip()]

    @field_validator("DISABLED_FEATURES", "ENABLED_FEATURES")
    @classmethod
    def validate_feature_names(cls, value: str) -> str:
        from helmet.registry import FEATURE_NAMES

        unknown = [name for name in cls._split_list(value) if name not in FEATURE_NAMES]
        if unknown:
            raise ValueError(f"Unknown helmet feature(s): {', '.join(unknown)}")
        return value

    @model_validator(mode="after")
    def check_toggles_do_not_overlap(self) -> "Settings":
        overlap = set(self.disabled_features) & set(self.enabled_features)
        if overlap:
            raise ValueError(
                f"Feature(s) both enabled and disabled: {', '.join(sorted(overlap))}"
            )
        return self

    @property
    def disabled_features(self) -> list[str]:
        return self._split_list(self.DISABLED_FEATURES)

    @property
    def enabled_features(self) -> list[str]:
        return self._split_list(self.ENABLED_FEATURES)

    def helmet_config(self) -> dict[str, Any]:
        """Build the configuration mapping accepted by ``helmet()``."""
        config: dict[str, Any] = {}
        for name in self.enabled_features:
            config[name] = True
        if self.HSTS_MAX_AGE is not None:
            config["hsts"] = {"max_age": self.HSTS_MAX_AGE}
        if self.FRAME_OPTIONS_ACTION:
            config["frameguard"] = {"action": self.FRAME_OPTIONS_ACTION}
        if self.REFERRER_POLICY is not None:
            config["referrer_policy"] = {"policy": self.REFERRER_POLICY}
        # an explicit disable wins over any override above
        for name in self.disabled_features:
            config[name] = False
        return config


def load_settings() -> Settings:
    """Read the current ``HELMET_*`` environment, reporting bad values as ``HelmetConfigError``."""
    try:
        return Settings()
    except ValidationError as exc:
        raise HelmetConfigError(f"Invalid HELMET_* settings: {exc}") from exc
