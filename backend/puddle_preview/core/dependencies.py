"""Core dependencies for FastAPI application."""

from typing import Annotated

from fastapi import Depends, Request

from .config import Settings, get_global_settings
from .puddle_api import PuddleAPIClient


def get_app_settings() -> Settings:
    """Get the process-wide settings."""
    return get_global_settings()


def get_puddle_client(request: Request) -> PuddleAPIClient:
    """Get the shared puddle.farm client created in the app lifespan."""
    return request.app.state.puddle_client


# Type aliases for cleaner dependency injection
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
PuddleClientDep = Annotated[PuddleAPIClient, Depends(get_puddle_client)]

__all__ = ["get_app_settings", "get_puddle_client", "SettingsDep", "PuddleClientDep"]
