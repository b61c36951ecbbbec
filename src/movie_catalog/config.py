"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App settings
    app_name: str = "Movie Catalog API"
    debug: bool = False

    # Database
    database_url: str = "sqlite+aiosqlite:///./movie_catalog.db"
    query_timeout: float = 10.0  # Seconds per storage call

    # Catalog loading
    load_attempts: int = 2
    load_cast: bool = True

    # Prefix for poster/photo paths handed to clients
    image_root: str = ""

    @field_validator("query_timeout")
    @classmethod
    def validate_query_timeout(cls, v: float) -> float:
        """Validate that the storage timeout is positive."""
        if v <= 0:
            raise ValueError("QUERY_TIMEOUT must be greater than zero")
        return v

    @field_validator("load_attempts")
    @classmethod
    def validate_load_attempts(cls, v: int) -> int:
        """Validate that at least one load attempt is made."""
        if v < 1:
            raise ValueError("LOAD_ATTEMPTS must be at least 1")
        return v

    def validate_runtime_config(self) -> list[str]:
        """Validate runtime configuration and return warnings."""
        warnings = []

        # SQLite has no stored procedures
        if self.database_url.startswith("sqlite"):
            warnings.append(
                "DATABASE_URL points at SQLite - PopulateMovieActors is not available"
            )

        # Warn about debug mode in production
        if self.debug:
            warnings.append("DEBUG mode is enabled - should be disabled in production")

        return warnings


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
