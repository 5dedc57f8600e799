"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Only ambient concerns live here (HTTP limits, language, logging); the CBR
endpoint and currency codes are constants owned by the provider.

Files that USE this module:
- cbrrates.adapters.providers.cbr (timeout and response size limit)
- cbrrates.shared.language (default language)
- cbrrates.shared.logging_conf (log destinations)

Files that this module USES:
- None (pure configuration module)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

SUPPORTED_LANGUAGES = ("ru", "en")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)
    max_response_bytes: int = Field(default=1024 * 1024, alias="MAX_RESPONSE_BYTES", ge=1024)  # 1MB

    # --- Language Settings ---
    default_language: str = Field(default="ru", alias="DEFAULT_LANGUAGE")

    # --- Logging ---
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="CBRRATES_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("default_language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Validate language code."""
        v = v.lower()
        if v not in SUPPORTED_LANGUAGES:
            raise ValueError("DEFAULT_LANGUAGE must be 'ru' or 'en'")
        return v


# Global settings instance
settings = Settings()
