"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Well-known development secret. Digests made with it protect nothing.
DEV_SSN_SECRET = "dev-ssn-secret-change-me"


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # SSN protection
    ssn_secret: str = DEV_SSN_SECRET  # HMAC key for stored SSN digests
    require_ssn_secret: bool = False  # Refuse to start on the development secret

    # Workflow settings
    post_signup_redirect: str = "/dashboard"  # Destination after a completed signup

    @field_validator("ssn_secret")
    @classmethod
    def blank_secret_is_unset(cls, value: str) -> str:
        """An empty or whitespace-only SSN_SECRET falls back to the development secret."""
        return value if value.strip() else DEV_SSN_SECRET

    @property
    def uses_default_ssn_secret(self) -> bool:
        return self.ssn_secret == DEV_SSN_SECRET


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
