"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

GAZETTE_NOTICES_URL = "https://www.thegazette.co.uk/all-notices/notice/data.json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Gazette API
    gazette_base_url: str = Field(
        default=GAZETTE_NOTICES_URL, description="Gazette notices JSON endpoint"
    )
    gazette_timeout: float = Field(default=30.0, description="HTTP request timeout in seconds")
    gazette_verify_tls: bool = Field(
        default=False,
        description=(
            "Verify the Gazette endpoint's TLS certificate. Off by default: the "
            "deployment trusts the endpoint's certificate unconditionally."
        ),
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
