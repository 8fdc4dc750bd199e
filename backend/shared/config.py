"""
Centralized configuration for the LearnHub backend.

All settings are loaded from environment variables with sensible defaults.
Token secrets keep the historical variable names (ACCESS_TOKEN, REFRESH_TOKEN,
ACTIVATION_SECRET) so existing deployments keep working.

Every expiry setting is expressed in seconds and is applied uniformly to the
JWT ``exp`` claim and to the cookie ``max_age``.
"""

from functools import lru_cache
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = "LearnHub API"
    app_version: str = "0.1.0"
    node_env: str = "development"

    # Token signing secrets
    activation_secret: str = ""
    access_token_secret: str = Field(
        default="",
        validation_alias=AliasChoices("ACCESS_TOKEN", "access_token_secret"),
    )
    refresh_token_secret: str = Field(
        default="",
        validation_alias=AliasChoices("REFRESH_TOKEN", "refresh_token_secret"),
    )

    # Token lifetimes (seconds)
    access_token_expire: int = 300
    refresh_token_expire: int = 1200
    activation_token_expire: int = 300

    # Session cache (empty selects the in-process cache)
    redis_url: str = ""
    course_cache_ttl: int = 604800  # 7 days

    # Supabase (credential store and course catalog)
    supabase_url: str = ""
    supabase_service_role_key: str = ""

    # Activation mail (unset host logs the mail instead of sending it)
    smtp_host: str = ""
    smtp_port: int = 587
    smtp_user: str = ""
    smtp_password: str = ""
    smtp_from: str = ""
    smtp_use_tls: bool = True

    @property
    def is_production(self) -> bool:
        """Whether cookies must be marked secure."""
        return self.node_env.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
