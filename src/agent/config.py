# =============================================================================
# agent/config.py - Server Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from agent.config import get_settings
#   print(get_settings().GEMINI_MODEL)
#
# Environment variables are loaded from:
# 1. System environment variables (set by the launcher or the container platform)
# 2. .env file in the working directory (if exists)
#
# The Gemini credential is optional here: a missing key is reported by the
# endpoints that need it, not at startup.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Server settings loaded from environment variables.

    External dependency settings (DATABASE_URI, REDIS_URL) are optional in
    development and required in production; see missing_required().
    """

    # -------------------------------------------------------------------------
    # Gemini / LLM Configuration
    # -------------------------------------------------------------------------
    # The launcher copies GOOGLE_API_KEY here when GEMINI_API_KEY is unset

    GEMINI_API_KEY: str = Field(
        default="",
        description="Gemini API key for the agent"
    )

    GEMINI_MODEL: str = Field(
        default="gemini-1.5-flash",
        description="Default Gemini model for the agent"
    )

    # -------------------------------------------------------------------------
    # External Dependencies
    # -------------------------------------------------------------------------
    # Injected from the secrets store at deploy time

    DATABASE_URI: str | None = Field(
        default=None,
        description="Database connection string"
    )

    REDIS_URL: str | None = Field(
        default=None,
        description="Redis connection URL for the cache"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Empty variables count as unset
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def has_api_key(self) -> bool:
        """Check if the Gemini credential is configured."""
        return bool(self.GEMINI_API_KEY)

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    def missing_required(self) -> list[str]:
        """
        List external dependency settings that are not configured.

        Returns:
            Names of unset settings, e.g. ["DATABASE_URI"]
        """
        missing = []
        if not self.DATABASE_URI:
            missing.append("DATABASE_URI")
        if not self.REDIS_URL:
            missing.append("REDIS_URL")
        return missing


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once.
    Tests call get_settings.cache_clear() after changing the environment.
    """
    return Settings()
