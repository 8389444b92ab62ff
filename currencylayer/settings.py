"""
Settings using Pydantic for environment-based configuration.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def default_config_file() -> Path:
    return Path.home() / ".config" / "currencylayer" / "config.json"


class Settings(BaseSettings):
    """currencylayer CLI configuration, read from CURRENCYLAYER_* variables."""

    api_key: str | None = Field(
        default=None, description="API key; overrides the stored key"
    )
    base_url: str = Field(
        default="http://api.currencylayer.com/", description="API base URL"
    )
    timeout: int = Field(default=30, gt=0, description="Request timeout in seconds")
    config_file: Path = Field(
        default_factory=default_config_file,
        description="File holding the stored API key",
    )
    log_level: str = Field(default="WARNING", description="Logging level")

    model_config = SettingsConfigDict(
        env_prefix="CURRENCYLAYER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
