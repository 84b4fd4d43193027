"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, RedisDsn
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    env: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    # API Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])

    # Redis (permission cache)
    redis_url: RedisDsn = Field(default="redis://localhost:6379/0", validate_default=True)
    redis_max_connections: int = Field(default=10, gt=0)
    redis_socket_timeout_seconds: float = Field(default=1.0, gt=0)

    # Permission checks (llms.txt / robots.txt)
    permission_user_agent: str = "CiteReadyBot/1.0"
    permission_crawler_name: str = "citereadybot"
    permission_timeout_seconds: float = 5.0
    permission_max_crawl_delay_seconds: float = 10.0
    permission_cache_enabled: bool = False
    permission_cache_ttl_seconds: int = Field(default=3600, gt=0)
    permission_cache_prefix: str = "permission:cache:"

    # Page fetching
    fetch_timeout_seconds: float = 15.0
    fetch_max_retries: int = 1

    # Scoring
    scoring_mode: Literal["weighted", "boolean"] = "weighted"

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.env == "production"

    @property
    def is_test(self) -> bool:
        """Check if running in test mode."""
        return self.env == "test"


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
