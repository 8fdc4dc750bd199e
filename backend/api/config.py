"""
API server configuration using Pydantic Settings.

Process-level options for the HTTP server; application settings (secrets,
stores, token lifetimes) live in shared.config.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """API configuration settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LEARNHUB_",
        case_sensitive=False,
        extra="ignore",
    )

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    reload: bool = False
    log_level: str = "info"

    # CORS settings (credentials are required because tokens travel in cookies)
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Direct Postgres URL, used by run_migrations.py
    supabase_db_url: str = ""


@lru_cache
def get_settings() -> APISettings:
    """Get cached settings instance."""
    return APISettings()
