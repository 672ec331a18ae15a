"""Web client configuration settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class WebSettings(BaseSettings):
    """Settings for the browser client service."""

    model_config = SettingsConfigDict(
        env_prefix="WEB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Backend API
    API_BASE_URL: str = "http://localhost:3000"
    API_TIMEOUT: float = 10.0  # Seconds

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # json or console


@lru_cache
def get_settings() -> WebSettings:
    """Get cached settings instance."""
    return WebSettings()


settings = get_settings()
