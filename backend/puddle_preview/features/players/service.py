"""Player preview service.

Fetches a player's record, picks the rating for one character and hands it
to the deployment's renderer. Stateless; one upstream call per preview.
"""

from typing import Optional

import structlog

from puddle_preview.core.exceptions import CharacterNotFoundError
from puddle_preview.core.puddle_api import PlayerRecord, PuddleAPIClient, RatingEntry

from .renderers import PreviewRenderer, RenderedPreview

logger = structlog.get_logger(__name__)


def select_rating(player: PlayerRecord, char_short: str) -> Optional[RatingEntry]:
    """Return the first rating whose short code matches exactly, or None."""
    return next((r for r in player.ratings if r.char_short == char_short), None)


class PlayerPreviewService:
    """Builds the preview document for a player/character pair."""

    def __init__(self, client: PuddleAPIClient, renderer: PreviewRenderer):
        """
        Initialize the service.

        :param client: puddle.farm API client
        :param renderer: Renderer for the configured output mode
        """
        self.client = client
        self.renderer = renderer

    async def render_preview(self, player_id: int, char_short: str) -> RenderedPreview:
        """
        Fetch, select and render.

        :param player_id: Player id taken from the request path
        :param char_short: Character short code, matched case-sensitively
        :returns: Rendered document with its media type
        :raises PuddleAPIError: If fetching or decoding the record fails
        :raises CharacterNotFoundError: If the player has no rating for the character
        """
        player = await self.client.get_player(player_id)

        rating = select_rating(player, char_short)
        if rating is None:
            logger.info(
                "Character not found for player",
                player_id=player_id,
                char_short=char_short,
                available=[r.char_short for r in player.ratings],
            )
            raise CharacterNotFoundError(player_id, char_short)

        preview = self.renderer.render(player_id, player, rating)
        logger.info(
            "Rendered player preview",
            player_id=player_id,
            char_short=char_short,
            renderer=type(self.renderer).__name__,
        )
        return preview
