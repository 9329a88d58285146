"""Players feature - Link previews for a player's character rating."""

from .router import router as players_router
from .service import PlayerPreviewService, select_rating
from .ranks import RankLabel, classify, rank_tier, RANK_THRESHOLDS
from .renderers import (
    PreviewRenderer,
    RenderedPreview,
    OpenGraphRenderer,
    DiscordEmbedRenderer,
    build_renderer,
)

__all__ = [
    # Router
    "players_router",
    # Service
    "PlayerPreviewService",
    "select_rating",
    # Ranks
    "RankLabel",
    "classify",
    "rank_tier",
    "RANK_THRESHOLDS",
    # Renderers
    "PreviewRenderer",
    "RenderedPreview",
    "OpenGraphRenderer",
    "DiscordEmbedRenderer",
    "build_renderer",
]
