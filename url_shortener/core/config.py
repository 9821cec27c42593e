"""Application configuration settings."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Database
    database_url: str = "url_shortener.db"
    database_timeout: float = 5.0

    # Application
    app_title: str = "URL Shortener Service"
    app_version: str = "0.2.0"
    app_description: str = "URL shortening service with per-day click analytics"
    log_level: str = "INFO"

    # Server
    host: str = "127.0.0.1"
    port: int = 8080

    # Short codes
    default_short_code_length: int = 6
    min_custom_code_length: int = 1
    max_custom_code_length: int = 64
    max_generation_attempts: int = 100

    # Analytics
    analytics_window_days: int = 7

    # CORS
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_origin_regex: Optional[str] = r"https://.*\.vercel\.app"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
