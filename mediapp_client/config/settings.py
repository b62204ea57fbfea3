"""
Client settings and configuration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.enums import ProfileLoading


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MEDIAPP_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Gateway
    gateway_url: str = "http://localhost:8550"
    api_base_url: str = "/api/v1"
    admin_token: str = "change-me"
    request_timeout: float = Field(default=10.0, gt=0)

    # Session
    token_db_path: str = "mediapp_tokens.db"
    profile_loading: ProfileLoading = ProfileLoading.DEFERRED

    # Logging
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Get client settings instance."""
    return Settings()
