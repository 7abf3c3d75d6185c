# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.APP_NAME)
#
# Values are loaded from (highest priority first):
# 1. System environment variables
# 2. .env file in project root (if exists)
# 3. config/<ENVIRONMENT>.json (if exists)
# 4. config/default.json
#
# The JSON file is selected by the ENVIRONMENT environment variable, so the
# same build can carry development and production values side by side.
# =============================================================================

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

# config/ and public/ live next to the app/ package
PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_CONFIG_DIR = PROJECT_ROOT / "config"
DEFAULT_STATIC_DIR = PROJECT_ROOT / "public"


def config_files() -> list[Path]:
    """
    JSON config files for the current environment, lowest priority first.

    CONFIG_DIR overrides the directory; ENVIRONMENT picks the overlay file.
    """
    config_dir = Path(os.environ.get("CONFIG_DIR", DEFAULT_CONFIG_DIR))
    environment = os.environ.get("ENVIRONMENT", "development")
    return [config_dir / "default.json", config_dir / f"{environment}.json"]


class Settings(BaseSettings):
    """
    Application settings.

    Uses pydantic-settings to:
    - Merge environment variables, .env and the JSON config files
    - Validate types and constraints
    - Provide sensible defaults for development

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    APP_NAME: str = Field(
        default="Usuarios API",
        description="Human-readable application name, logged at startup"
    )

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    # -------------------------------------------------------------------------
    # Server Settings
    # -------------------------------------------------------------------------

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    STATIC_DIR: str = Field(
        default=str(DEFAULT_STATIC_DIR),
        description="Directory served as static files at the root path"
    )

    # -------------------------------------------------------------------------
    # Database
    # -------------------------------------------------------------------------
    # Users live in memory; the host is only reported at startup

    DB_HOST: str = Field(
        default="localhost",
        description="Database server host"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        # Load from .env file in project root
        env_file=".env",
        env_file_encoding="utf-8",
        # Treat empty env vars as unset
        env_ignore_empty=True,
        # Case-sensitive environment variable names
        case_sensitive=True,
        # .env may hold keys for other tools
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the environment-selected JSON files below env vars and .env."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            JsonConfigSettingsSource(settings_cls, json_file=config_files()),
            file_secret_settings,
        )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only read the config files and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
