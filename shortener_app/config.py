from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """

    # Environment
    environment: str = "development"
    debug: bool = False  # True swaps JSON 500 bodies for tracebacks

    # Application
    app_name: str = "URL Shortener"
    app_version: str = "1.0.0"

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # URL Shortener specific
    base_url: str = "http://127.0.0.1:8000"  # Origin prepended to every short id
    short_id_length: int = 8
    max_retries: int = 5  # Attempts before giving up on id collisions

    # Short id generation strategy
    short_id_strategy: str = "uuid"  # Options: "uuid", "random"

    # Cache settings
    cache_backend: str = "memory"  # Options: "memory", "redis", "null"
    redis_url: str = "redis://localhost:6379/0"
    cache_duration_in_hours: int = Field(
        default=24,
        validation_alias=AliasChoices("cache_duration_in_hours", "CacheDurationInHours"),
    )
    cache_max_entries: int = 100_000

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def cache_ttl(self) -> int:
        """Cache TTL in seconds"""
        return self.cache_duration_in_hours * 3600


# Create settings instance
settings = Settings()
