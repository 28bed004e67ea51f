"""
Configuration management for Badge Designer.
Uses pydantic-settings for environment variable parsing.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """Application settings loaded from BADGE_DESIGNER_* environment variables."""

    # Persistence
    storage_path: Path = Field(
        default=Path("~/.badge_designer/badge_designer_state.toml"),
        description="File holding the autosaved configuration"
    )

    # Export
    export_dir: Path = Field(
        default=Path("."),
        description="Directory exported configurations are written to"
    )
    export_basename: str = Field(
        default="badge",
        description="Exported file name without the .toml extension"
    )

    # Defaults for a fresh animation
    default_padding: int = Field(
        default=0,
        ge=0,
        description="Padding for new animations and for saved files without a padding field"
    )
    default_speed: int = Field(
        default=5,
        ge=1,
        le=7,
        description="Playback speed for new animations"
    )

    # Display
    visible_frames: int = Field(
        default=3,
        ge=1,
        description="Number of frames shown on screen at once"
    )

    # Logging
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize to an upper-case logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    class Config:
        env_prefix = "BADGE_DESIGNER_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    """
    return Settings()
