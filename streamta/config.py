"""Pydantic Settings configuration models.

Config hierarchy (lowest to highest priority):
1. Pydantic defaults (in code below)
2. .env file (loaded by Pydantic Settings)
3. Environment variables (e.g., STREAMTA_INDICATORS__RSI_DAYS=21)
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
VALID_LOG_FORMATS = frozenset({"console", "json"})


class IndicatorConfig(BaseModel):
    """Indicator parameters. Defaults match each indicator's own default."""

    sma_period: int = Field(default=9, ge=1)
    ema_period: int = Field(default=9, ge=1)
    std_dev_period: int = Field(default=9, ge=1)
    mad_period: int = Field(default=9, ge=1)
    min_period: int = Field(default=14, ge=1)
    max_period: int = Field(default=14, ge=1)
    roc_period: int = Field(default=9, ge=1)
    bollinger_period: int = Field(default=9, ge=1)
    bollinger_multiplier: float = Field(default=2.0, ge=0.0, allow_inf_nan=False)
    rsi_days: int = Field(default=14, ge=1)


class AppConfig(BaseSettings):
    """Top-level application configuration.

    Env var examples:
        STREAMTA_LOG_LEVEL=DEBUG
        STREAMTA_LOG_FORMAT=json
        STREAMTA_INDICATORS__SMA_PERIOD=20
    """

    model_config = SettingsConfigDict(
        env_prefix="STREAMTA_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"
    log_format: str = "console"
    indicators: IndicatorConfig = IndicatorConfig()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, got {v}"
            )
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in VALID_LOG_FORMATS:
            raise ValueError(
                f"log_format must be one of {sorted(VALID_LOG_FORMATS)}, got {v}"
            )
        return v
