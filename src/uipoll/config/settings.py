"""Configuration management for uipoll using pydantic-settings.

Supports environment variables, .env files, and type validation.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..model import Region


class PollerSettings(BaseSettings):
    """Main configuration settings for the polling helpers."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="UIPOLL_",
        case_sensitive=False,
        extra="ignore",
    )

    # Default search region
    region_x: int = Field(0, description="Left edge of the default search region")
    region_y: int = Field(0, description="Top edge of the default search region")
    region_width: int = Field(1920, gt=0, description="Width of the default search region")
    region_height: int = Field(1080, gt=0, description="Height of the default search region")

    # Main UI detection
    main_ui_marker: Path | None = Field(
        None, description="Image that is only visible on the application's main screen"
    )

    # Polling defaults (seconds)
    find_timeout: float = Field(3.0, ge=0.0, description="Default timeout for find_image")
    wait_timeout: float = Field(5.0, ge=0.0, description="Default timeout for wait_until_image_*")
    poll_interval: float = Field(0.05, ge=0.0, description="Delay between recognition attempts")
    ocr_attempts: int = Field(5, ge=1, description="Default number of OCR attempts")
    pre_click_delay: float = Field(0.05, ge=0.0, description="Delay before clicking a match")
    post_click_delay: float = Field(0.05, ge=0.0, description="Delay after clicking a match")

    # Recognition settings
    template_threshold: float = Field(
        0.8, ge=0.0, le=1.0, description="Minimum similarity for a template match"
    )
    ocr_languages: list[str] = Field(default_factory=lambda: ["en"], description="OCR languages")
    ocr_min_confidence: float = Field(
        0.0, ge=0.0, le=1.0, description="Minimum confidence for OCR fragments"
    )

    # Logging settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Log level"
    )
    structured_logging: bool = Field(False, description="Render logs as JSON")
    log_file: Path | None = Field(None, description="Optional file that mirrors log output")

    @model_validator(mode="after")
    def _check_languages(self) -> "PollerSettings":
        if not self.ocr_languages:
            raise ValueError("At least one OCR language is required")
        return self

    @property
    def default_region(self) -> Region:
        """Default search region built from the region_* fields."""
        return Region(self.region_x, self.region_y, self.region_width, self.region_height)


# Singleton instance
_settings: PollerSettings | None = None


def get_settings() -> PollerSettings:
    """Get the singleton settings instance.

    Returns:
        PollerSettings instance
    """
    global _settings

    if _settings is None:
        _settings = PollerSettings()

    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (mainly for testing)."""
    global _settings
    _settings = None
