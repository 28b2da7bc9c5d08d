# textutils/service/config.py

"""Application configuration using Pydantic Settings.

Manages environment variables, defaults, and validation rules.
"""

from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from textutils.core.domain import BaseUrls
from textutils.core.exceptions import UnknownPresetError
from textutils.logic.mask import MaskEngine

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Global application settings.

    Loads values from environment variables (prefix 'TEXTUTILS_') or .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="TEXTUTILS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Link bases
    hashtag_base_url: Optional[str] = Field(
        default=None, description="Base URL for hashtag links (default '/tags')."
    )
    mention_base_url: Optional[str] = Field(
        default=None, description="Base URL for mention links (default '/users')."
    )
    assets_base_url: Optional[str] = Field(
        default=None, description="Base URL for relative markdown link targets."
    )

    log_level: str = Field(default="INFO", description="Application log level.")
    log_json: bool = Field(default=True, description="Emit JSON log lines.")

    # Presets used by the convenience formatters
    phone_preset: str = Field(default="phone", description="Preset for phone values.")
    date_preset: str = Field(default="date", description="Preset for date values.")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the level is a standard logging level name."""
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @field_validator("phone_preset", "date_preset")
    @classmethod
    def validate_preset(cls, v: str) -> str:
        """Ensure the preset exists in the preset table."""
        try:
            MaskEngine.preset(v)
        except UnknownPresetError as e:
            raise ValueError(str(e)) from e
        return v

    @property
    def base_urls(self) -> BaseUrls:
        return BaseUrls(
            hashtags=self.hashtag_base_url,
            mentions=self.mention_base_url,
            assets=self.assets_base_url,
        )


# Singleton settings instance
settings = Settings()
