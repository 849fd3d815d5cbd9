from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # API Configuration
    app_name: str = "Garage Search Service"
    app_version: str = "1.0.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8004

    # Logging Configuration
    log_level: str = "INFO"
    log_format: str = "json"

    # Search Configuration
    default_search_mode: str = "all"
    default_threshold: float = 0.6
    default_max_results: int = 20
    max_results_limit: int = 100
    max_search_term_length: int = 20

    # Suggestion Configuration
    suggestion_min_length: int = 2
    default_suggestion_limit: int = 10

    # Plate cache (wholesale refresh window)
    plate_cache_ttl_seconds: float = 30.0

    model_config = SettingsConfigDict(
        env_prefix="GARAGE_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
