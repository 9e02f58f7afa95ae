"""
Centralized settings management using pydantic-settings.

All environment variables and configuration values are defined here.
Use get_settings() to access the singleton settings instance.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.logging import get_logger

logger = get_logger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Backend connection (both may be empty; the storefront then runs without
    data and every remote call reports an error):
        - SUPABASE_URL: Supabase project URL
        - SUPABASE_ANON_KEY: Supabase anonymous (public) key

    Optional environment variables:
        - ENVIRONMENT: Environment name (development, staging, production)
        - LOG_LEVEL: Minimum log level (default: INFO)
        - JSON_LOGS: Emit JSON logs instead of console output
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Environment
    # ==========================================================================
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Minimum log level")
    json_logs: bool = Field(default=False, description="Render logs as JSON")

    @property
    def is_development(self) -> bool:
        return self.environment.lower() in ("development", "dev", "local")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() in ("production", "prod")

    @property
    def use_json_logs(self) -> bool:
        """JSON logs when asked for explicitly, and always in production."""
        return self.json_logs or self.is_production

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper() or "INFO"
        return v

    # ==========================================================================
    # Supabase
    # ==========================================================================
    supabase_url: str = Field(default="", description="Supabase project URL")
    supabase_anon_key: str = Field(default="", description="Supabase anonymous key")

    @property
    def is_configured(self) -> bool:
        return bool(self.supabase_url.strip() and self.supabase_anon_key.strip())

    # ==========================================================================
    # Storefront
    # ==========================================================================
    popular_limit: int = Field(default=6, ge=1, description="Popular picks shown on the home page")
    similar_limit: int = Field(default=3, ge=0, description="Similar items shown on a detail page")
    history_limit: int = Field(default=6, ge=1, description="Viewing history entries on the profile page")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Uses lru_cache to ensure only one instance is created.
    Settings are loaded from environment variables and .env file.
    """
    return Settings()


def get_settings_for_testing(**overrides) -> Settings:
    """
    Create a settings instance for testing with optional overrides.

    This bypasses the cache to allow different settings in tests.
    """
    return Settings(**overrides)


def log_missing_configuration(settings: Settings) -> bool:
    """Log which backend variables are missing. Returns True when something is missing."""
    missing = []
    if not settings.supabase_url.strip():
        missing.append("SUPABASE_URL")
    if not settings.supabase_anon_key.strip():
        missing.append("SUPABASE_ANON_KEY")
    if missing:
        logger.error(
            "Supabase configuration missing",
            missing=missing,
            hint="create a .env file in the project root with SUPABASE_URL and SUPABASE_ANON_KEY",
        )
        return True
    return False
