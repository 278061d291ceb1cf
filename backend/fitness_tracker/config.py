"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fitness_tracker.shared.formatters import SUPPORTED_LANGUAGES


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # === Reports ===
    report_language: str = Field(
        default="en",
        description="Training report language (en, ru)"
    )

    @field_validator('report_language')
    @classmethod
    def check_report_language(cls, v: str) -> str:
        """Normalize and restrict to supported report languages."""
        v = v.strip().lower()
        if v not in SUPPORTED_LANGUAGES:
            raise ValueError(
                f"report_language must be one of {', '.join(SUPPORTED_LANGUAGES)}"
            )
        return v

    model_config = SettingsConfigDict(
        env_prefix="FITNESS_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
