"""Configuration management for lsh."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PROMPT = "lsh> "
DEFAULT_PATH = ("/bin",)


class Settings(BaseSettings):
    """Shell settings."""

    model_config = SettingsConfigDict(
        env_prefix="LSH_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    prompt: str = Field(default=DEFAULT_PROMPT, description="Interactive prompt")
    path: list[str] = Field(default_factory=lambda: list(DEFAULT_PATH), description="Initial search path")

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Log level")


def load_settings() -> Settings:
    """Load settings from the environment and an optional .env file."""
    return Settings()
