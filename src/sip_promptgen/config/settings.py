"""Application settings loaded from environment variables and .env files."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sip_promptgen.config.constants import Limits
from sip_promptgen.exceptions import ConfigurationError

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Runtime configuration for sip-promptgen.

    Every field maps to an upper-case environment variable of the same name
    (e.g. ``sip_match_limit`` <- ``SIP_MATCH_LIMIT``).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    sip_log_level: str = Field(default="INFO", description="Logging level")
    sip_catalog_dir: Path | None = Field(
        default=None,
        description="Directory with override catalogs (text-templates.json, ...)",
    )
    sip_match_limit: int = Field(
        default=Limits.CYCLE_MATCHES,
        ge=1,
        description="Number of ranked matches the generation flow cycles through",
    )
    sip_match_threshold: int = Field(
        default=Limits.BEST_MATCH_THRESHOLD,
        ge=0,
        description="Minimum score for best-match lookups",
    )
    sip_default_text_model: str = Field(default="GPT-4")
    sip_default_image_model: str = Field(default="DALL-E 3")
    sip_default_video_model: str = Field(default="Runway Gen-2")

    @field_validator("sip_log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level '{value}'. Use one of: {', '.join(VALID_LOG_LEVELS)}")
        return level

    def default_model_for(self, generator_type: str) -> str:
        """Return the configured default model label for a generator type."""
        return {
            "text": self.sip_default_text_model,
            "image": self.sip_default_image_model,
            "video": self.sip_default_video_model,
        }[getattr(generator_type, "value", generator_type)]

    def is_configured(self) -> dict[str, bool]:
        """Report which optional settings are set.

        Returns:
            Mapping of setting name to whether it is usable.
        """
        catalog_dir = self.sip_catalog_dir
        return {
            "sip_catalog_dir": catalog_dir is not None and catalog_dir.is_dir(),
        }


@lru_cache
def get_settings() -> Settings:
    """Get the cached application settings.

    Raises:
        ConfigurationError: If an environment variable holds an invalid value.
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError("Invalid configuration", details=str(e)) from e


def clear_settings_cache() -> None:
    """Clear the settings cache so the next call re-reads the environment."""
    get_settings.cache_clear()
