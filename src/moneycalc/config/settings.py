# src/moneycalc/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables (or a local .env file) with
validation; every field has a working default so the app starts with no
configuration at all.

Files that USE this module:
- moneycalc.app (loads settings for logging and wiring)
- moneycalc.adapters.providers.* (API base URL, timeout, lookback window)
- moneycalc.application.chart_animator (animation cadence)
- moneycalc.adapters.tk.* (display precision, cutoff, UI polling)

Files that this module USES:
- moneycalc.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from datetime import time  # Time of day for the publication cutoff
from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from moneycalc.shared.validators import (
    parse_cutoff,  # Parse HH:MM cutoff values
    validate_api_base_url,  # Validate REST API base URL format
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Remote API ---
    api_base_url: str = Field(
        default="https://api.frankfurter.dev/v1", alias="MONEYCALC_API_BASE_URL"
    )
    http_timeout_seconds: int = Field(default=10, alias="MONEYCALC_HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Chart ---
    animation_interval_ms: int = Field(default=8, alias="MONEYCALC_ANIMATION_INTERVAL_MS", ge=0, le=1000)
    lookback_days: int = Field(default=365, alias="MONEYCALC_LOOKBACK_DAYS", ge=1, le=3650)

    # --- Money display ---
    # The provider publishes reference rates once a day around 16:00 CET
    last_update_cutoff: str = Field(default="16:00", alias="MONEYCALC_LAST_UPDATE_CUTOFF")
    display_decimals: int = Field(default=4, alias="MONEYCALC_DISPLAY_DECIMALS", ge=0, le=12)

    # --- UI ---
    ui_poll_interval_ms: int = Field(default=15, alias="MONEYCALC_UI_POLL_INTERVAL_MS", ge=1, le=1000)

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="MONEYCALC_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @property
    def animation_interval_seconds(self) -> float:
        """Animation cadence in seconds, as expected by threading waits."""
        return self.animation_interval_ms / 1000.0

    @property
    def last_update_cutoff_time(self) -> time:
        """Publication cutoff as a datetime.time."""
        parsed = parse_cutoff(self.last_update_cutoff)
        assert parsed is not None  # guaranteed by validate_cutoff
        return parsed

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Validate API base URL and drop any trailing slash."""
        v = v.strip()
        if not validate_api_base_url(v):
            raise ValueError("MONEYCALC_API_BASE_URL must be an http(s) URL")
        return v.rstrip("/")

    @field_validator("last_update_cutoff")
    @classmethod
    def validate_cutoff(cls, v: str) -> str:
        """Validate HH:MM cutoff format."""
        if parse_cutoff(v) is None:
            raise ValueError("MONEYCALC_LAST_UPDATE_CUTOFF must be HH:MM")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate logging level name."""
        v = v.upper()
        if v not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError("LOG_LEVEL must be a standard logging level name")
        return v


# Global settings instance
settings = Settings()
