"""
Centralized settings configuration using Pydantic BaseSettings.

All environment variables are defined here with types, defaults, and validation.
Use get_settings() to obtain the cached, process-wide instance.

Usage:
    from backend.settings import get_settings, Settings

    settings = get_settings()
    print(settings.local_store_path)

    # Tests: explicit values, no .env file
    settings = Settings(environment="test", _env_file=None)
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Core Environment
    # -------------------------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production, test",
    )

    # -------------------------------------------------------------------------
    # Local Store
    # -------------------------------------------------------------------------
    local_store_path: Optional[str] = Field(
        default="uplift_store.json",
        description="JSON file backing the local store (empty for in-memory)",
    )

    # -------------------------------------------------------------------------
    # Remote Store - Supabase
    # -------------------------------------------------------------------------
    remote_sync_enabled: bool = Field(
        default=True,
        description="Mirror records to the remote store",
    )
    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL",
    )
    supabase_service_role_key: Optional[str] = Field(
        default=None,
        description="Supabase service role key (full access)",
    )
    supabase_anon_key: Optional[str] = Field(
        default=None,
        description="Supabase anonymous key (limited access)",
    )
    supabase_workouts_table: str = Field(
        default="workout_sessions",
        description="Table holding workout rows",
    )
    supabase_templates_table: str = Field(
        default="workout_templates",
        description="Table holding template rows",
    )

    @property
    def supabase_key(self) -> Optional[str]:
        """Get the best available Supabase key (service role preferred)."""
        return self.supabase_service_role_key or self.supabase_anon_key

    # -------------------------------------------------------------------------
    # Remote Store - Retry
    # -------------------------------------------------------------------------
    remote_max_attempts: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Attempts per remote call for transient failures",
    )
    remote_min_wait_seconds: float = Field(
        default=0.5,
        gt=0,
        description="Minimum backoff between remote attempts",
    )
    remote_max_wait_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Maximum backoff between remote attempts",
    )

    # -------------------------------------------------------------------------
    # Observability - Sentry
    # -------------------------------------------------------------------------
    sentry_dsn: Optional[str] = Field(
        default=None,
        description="Sentry DSN for error tracking",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    @model_validator(mode="after")
    def validate_backoff(self) -> "Settings":
        """Ensure the backoff window is not inverted."""
        if self.remote_min_wait_seconds > self.remote_max_wait_seconds:
            raise ValueError("remote_min_wait_seconds cannot exceed remote_max_wait_seconds")
        return self

    # -------------------------------------------------------------------------
    # Helper Properties
    # -------------------------------------------------------------------------
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == "test"

    @property
    def remote_configured(self) -> bool:
        """Remote sync is enabled and Supabase credentials are present."""
        return bool(self.remote_sync_enabled and self.supabase_url and self.supabase_key)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    For testing, you can clear the cache with get_settings.cache_clear().

    Returns:
        Settings: Application settings instance
    """
    return Settings()
