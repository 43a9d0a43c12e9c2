# src/xquote/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables or a .env file.

Files that USE this module:
- xquote.app (loads settings for the offering, bounds and logging)
- xquote.application.entry_controller (EntryController.from_settings)
- xquote.shared.language (default language)

Files that this module USES:
- xquote.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator, model_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from xquote.shared.validators import (
    validate_bound,  # Validate min/max payin bounds
    validate_currency_code,  # Validate currency code format
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Precision ---
    # Scale of both demo currencies (see app.build_offering)
    unit_scale: int = Field(default=8, alias="UNIT_SCALE", ge=0, le=18)
    rate_display_decimals: int = Field(default=4, alias="RATE_DISPLAY_DECIMALS", ge=0, le=8)
    fee_decimals: int = Field(default=2, alias="FEE_DECIMALS", ge=0, le=8)

    # --- Bounds (negative = unbounded) ---
    min_payin_amount: float = Field(default=-1.0, alias="MIN_PAYIN_AMOUNT")
    max_payin_amount: float = Field(default=-1.0, alias="MAX_PAYIN_AMOUNT")

    # --- Offering used by the demo driver ---
    payin_currency: str = Field(default="USD", alias="PAYIN_CURRENCY")
    payout_currency: str = Field(default="EUR", alias="PAYOUT_CURRENCY")
    payout_units_per_payin_unit: float = Field(default=0.91, alias="PAYOUT_UNITS_PER_PAYIN_UNIT", gt=0)
    fee_subunits: Optional[int] = Field(default=None, alias="FEE_SUBUNITS", ge=0)

    # --- Language Settings ---
    default_language: str = Field(default="en", alias="DEFAULT_LANGUAGE")

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @property
    def has_min_bound(self) -> bool:
        return self.min_payin_amount >= 0

    @property
    def has_max_bound(self) -> bool:
        return self.max_payin_amount >= 0

    @field_validator("payin_currency", "payout_currency", mode="before")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        """Validate currency code format."""
        v = str(v).strip().upper()
        if not validate_currency_code(v):
            raise ValueError("Invalid currency code format")
        return v

    @field_validator("min_payin_amount", "max_payin_amount")
    @classmethod
    def validate_bounds(cls, v: float) -> float:
        """Validate that a bound is a finite number."""
        if not validate_bound(v):
            raise ValueError("Payin bounds must be finite numbers")
        return v

    @field_validator("default_language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Validate language code."""
        if v not in ["en", "fa"]:
            raise ValueError("DEFAULT_LANGUAGE must be 'en' or 'fa'")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        v = v.upper()
        if v not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError("LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return v

    @model_validator(mode="after")
    def validate_bound_order(self) -> "Settings":
        """Reject MIN_PAYIN_AMOUNT > MAX_PAYIN_AMOUNT when both are set."""
        if self.has_min_bound and self.has_max_bound and self.min_payin_amount > self.max_payin_amount:
            raise ValueError("MIN_PAYIN_AMOUNT cannot exceed MAX_PAYIN_AMOUNT")
        return self


# Global settings instance
settings = Settings()
