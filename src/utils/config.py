"""
Configuration Management

Uses Pydantic Settings for environment-based configuration.
Loads from .env file automatically.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Application Settings
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Bulk processing defaults (overridable per request)
    BULK_MAX_CONCURRENCY: int = 50
    BULK_BATCH_SIZE: int = 10
    BULK_RETRY_ATTEMPTS: int = 3
    BULK_RETRY_DELAY_MS: int = 1000
    BULK_TIMEOUT_MS: int = 300000  # 5 minutes per item
    BULK_ENABLE_PROGRESS_TRACKING: bool = True

    # Benchmark aggregation
    BENCHMARK_LSI_ZERO_FILL: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra fields in .env file
        case_sensitive = False  # Allow both UPPERCASE and lowercase


@lru_cache
def get_settings() -> Settings:
    """Get or create cached settings instance."""
    return Settings()
