"""Runtime configuration via environment variables with NUMIFY_ prefix."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Number humanizer configuration.

    Locale tables and size limits are compiled in; only ambient behaviour
    (logging, debounce timing, initial selectors) is read from ``NUMIFY_*``.
    """

    model_config = SettingsConfigDict(env_prefix="NUMIFY_")

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_json: bool = True

    # ── Forms ──────────────────────────────────────────────────────────────
    debounce_ms: int = Field(default=250, ge=0)
    default_country: str = "US"
    default_format: str = "en"

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000
