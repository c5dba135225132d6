from pathlib import Path
from typing import Final

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_LOG_DIR, LOG_LEVELS
from .domain.constants import MAX_BOATS


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env files."""

    # Application configuration
    app_name: str = Field(default="Marina", description="Application name")
    version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Inventory configuration
    capacity: int = Field(
        default=MAX_BOATS, ge=1, description="Maximum number of boats in the marina"
    )

    # Logging configuration
    log_level: str | None = Field(
        default=None, description="Override the log level (e.g. 'INFO')"
    )
    log_to_file: bool = Field(
        default=False, description="Also write logs to a file in log_dir"
    )
    log_dir: Path = Field(
        default=Path(DEFAULT_LOG_DIR), description="Directory for log files"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str | None:
        """Normalize the log level name and reject unknown ones."""
        if v is None:
            return v
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(LOG_LEVELS)}")
        return level

    # Pydantic Settings configuration
    model_config = SettingsConfigDict(
        env_prefix="MARINA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def effective_log_level(self) -> str:
        """Get the log level, defaulting to DEBUG in debug mode."""
        if self.log_level:
            return self.log_level
        return "DEBUG" if self.debug else "ERROR"


# Global settings instance
settings: Final = Settings()
