"""Application configuration using Pydantic BaseSettings."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS: list[str] = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """vidinfo configuration loaded from environment variables."""

    model_config = {"env_prefix": "VIDINFO_", "env_file": ".env", "extra": "ignore"}

    # Validation
    supported_formats: list[str] = [".mp4", ".mkv", ".avi", ".mov"]

    # Input
    max_attempts: int | None = Field(default=None, gt=0)

    # Output
    output: Literal["text", "json"] = "text"
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v


def get_settings() -> Settings:
    """Return a settings instance."""
    return Settings()
