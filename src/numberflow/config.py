"""Engine configuration via environment variables with NUMBERFLOW_ prefix."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Number-input editing engine configuration.

    All settings are read from environment variables prefixed with ``NUMBERFLOW_``.
    """

    model_config = SettingsConfigDict(env_prefix="NUMBERFLOW_")

    # ── Locale ─────────────────────────────────────────────────────────────
    # Used whenever a caller does not name a locale explicitly
    default_locale: str = "en-US"

    # ── Display ────────────────────────────────────────────────────────────
    format: bool = False
    auto_add_leading_zero: bool = False
    max_length: int | None = Field(default=None, ge=0)

    # ── Diffing ────────────────────────────────────────────────────────────
    # LCS alignment is O(n*m); longer strings fall back to prefix/suffix alignment
    lcs_max_length: int = Field(default=64, ge=1)

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Read settings from the current environment; callers that need a fixed
    configuration construct and pass a ``Settings`` instance instead."""
    return Settings()
