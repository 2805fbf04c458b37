"""
Application configuration using Pydantic Settings.
Loads from environment variables and .env file.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "QueueLink"
    app_env: str = "development"  # development, staging, production
    debug: bool = True

    # Logging - falls back to DEBUG/INFO depending on `debug`
    log_level: Optional[str] = None

    # Demo queues are (re)created on startup and on read endpoints
    seed_demo_data: bool = True

    # Frontends allowed to call the API from the browser
    cors_origins: list[str] = [
        "http://localhost:3000",  # Local web dev
        "http://127.0.0.1:3000",
    ]

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def effective_log_level(self) -> str:
        """Log level name to configure the root logger with."""
        if self.log_level:
            return self.log_level.upper()
        return "DEBUG" if self.debug else "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
