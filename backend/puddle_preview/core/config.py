"""Configuration settings for the player preview service."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

from .enums import OutputMode

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application Configuration
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Process binding
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8002)
    workers: int = Field(default=2, ge=1)

    # Upstream statistics API
    puddle_api_base_url: str = Field(
        default="https://puddle.farm",
        description="Base URL of the statistics API serving /api/player/{id}",
    )

    # Public site, used for canonical and avatar links
    puddle_site_url: str = Field(default="https://puddle.farm")
    site_name: str = Field(default="puddle.farm")

    # Presentation
    output_mode: OutputMode = Field(
        default=OutputMode.OPENGRAPH,
        description="Which preview document this deployment renders",
    )
    discord_embed_double_encoded: bool = Field(
        default=True,
        description="Serve the embed as a JSON string holding the serialized payload",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix for environment variables
        extra="forbid",  # Forbid extra fields for better type safety
    )


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()


# Create a global settings instance lazily
settings: Settings | None = None


def get_global_settings() -> Settings:
    """Get or create the global settings instance."""
    global settings
    if settings is None:
        settings = get_settings()
    return settings
