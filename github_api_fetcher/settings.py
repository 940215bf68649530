"""Application settings loaded from environment variables and .env file."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_ENDPOINT = "https://api.github.com/graphql"


class Settings(BaseSettings):
    """Settings for the GitHub API fetcher.

    Every field can be set with a ``GITHUB_FETCHER_`` prefixed environment
    variable, e.g. ``GITHUB_FETCHER_API_ACCESS_TOKEN``.
    """

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_FETCHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_access_token: str | None = None
    api_endpoint: str = DEFAULT_API_ENDPOINT
    cache_dir: Path | None = None
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
