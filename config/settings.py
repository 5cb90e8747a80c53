"""
Configuration Settings

Centralized configuration management using Pydantic and environment variables.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Values can also be placed in a local .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Houses API settings
    houses_api_url: str = "http://app-homevision-staging.herokuapp.com/api_project/houses"
    first_page: int = 1
    last_page: int = 10
    max_fetch_attempts: int = 20
    request_timeout_seconds: int = 30

    # Download settings
    download_workers: int = 20
    channel_capacity: int = 1
    download_chunk_size: int = 64 * 1024
    output_dir: str = "."

    # Logging settings
    log_level: str = "INFO"
    log_format: str = "console"

    # Application settings
    environment: str = "development"


# Singleton instance
settings = Settings()
