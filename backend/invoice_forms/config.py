"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden by an INVOICE_FORMS_* environment variable
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: works out-of-the-box for local development
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from invoice_forms.core.domain_types import Locale


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="INVOICE_FORMS_", case_sensitive=False,
    )

    # Localization
    default_locale: Locale = Locale.CS

    # Validation engine
    # strict: a missing generic message raises instead of showing the raw key
    strict_messages: bool = False
    rule_timeout_seconds: float | None = 5.0

    @field_validator("rule_timeout_seconds", mode="before")
    @classmethod
    def disable_timeout(cls, v):
        """0, negative or empty values disable the per-rule bound."""
        if v in ("", None):
            return None
        if float(v) <= 0:
            return None
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
