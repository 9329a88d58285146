"""Dependencies for the players feature.

Injects the shared API client and the configured renderer into the service.
"""

from typing import Annotated

from fastapi import Depends

from puddle_preview.core.dependencies import PuddleClientDep, SettingsDep
from .renderers import PreviewRenderer, build_renderer
from .service import PlayerPreviewService


def get_preview_renderer(settings: SettingsDep) -> PreviewRenderer:
    """Get the renderer for the deployment's output mode.

    :param settings: Application settings
    :returns: Preview renderer
    """
    return build_renderer(settings)


def get_preview_service(
    client: PuddleClientDep,
    renderer: Annotated[PreviewRenderer, Depends(get_preview_renderer)],
) -> PlayerPreviewService:
    """Get player preview service instance.

    :param client: Shared puddle.farm client
    :param renderer: Preview renderer
    :returns: Preview service with injected dependencies
    """
    return PlayerPreviewService(client, renderer)


# Type aliases for cleaner dependency injection
PlayerPreviewServiceDep = Annotated[PlayerPreviewService, Depends(get_preview_service)]

__all__ = [
    "get_preview_renderer",
    "get_preview_service",
    "PlayerPreviewServiceDep",
]
