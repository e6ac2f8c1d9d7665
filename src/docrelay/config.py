"""Application configuration from environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="DOCRELAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Dispatch policy
    accepted_formats: list[str] = Field(
        default=["4.0", "3.1"],
        min_length=1,
        description="Document format tokens eligible for sending (exact match)",
    )
    freshness_months: int = Field(
        default=1,
        ge=1,
        description="Calendar months a document stays fresh after creation",
    )
    dispatch_concurrency: int = Field(
        default=8,
        ge=1,
        description="Maximum files processed concurrently in one batch",
    )

    # Application
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode; forces DEBUG logging")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
