"""Renderers turning a selected rating into a preview document.

Two document kinds exist: an HTML page with Open Graph tags for link
previews, and a Discord embed. A deployment picks one through
``build_renderer``.
"""

import html
import json
from dataclasses import dataclass
from typing import Protocol

from puddle_preview.core.config import Settings
from puddle_preview.core.enums import OutputMode
from puddle_preview.core.puddle_api import PlayerRecord, PuddleAPIEndpoints, RatingEntry

from .ranks import classify
from .schemas import DiscordEmbed, DiscordWebhookPayload, EmbedField, EmbedFooter

HTML_MEDIA_TYPE = "text/html"
JSON_MEDIA_TYPE = "application/json"

EMBED_DESCRIPTION = "Guilty Gear -Strive- rating"
EMBED_COLOR = 0x5865F2
EMBED_FOOTER = "puddle.farm"

OPENGRAPH_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <meta property="og:title" content="{title}" />
    <meta property="og:type" content="website" />
    <meta property="og:description" content="{description}" />
    <meta property="og:site_name" content="{site_name}" />
    <meta property="og:url" content="{url}" />
    <meta property="og:image" content="{image}" />
</head>
<body>
    <p>Player stats for {player_name}</p>
</body>
</html>"""


@dataclass(frozen=True)
class RenderedPreview:
    """Response body and its media type."""

    content: str
    media_type: str


class PreviewRenderer(Protocol):
    """Anything that can render a selected rating for a player."""

    def render(
        self, player_id: int, player: PlayerRecord, rating: RatingEntry
    ) -> RenderedPreview: ...


class OpenGraphRenderer:
    """HTML page whose head carries Open Graph metadata.

    With ``ranked`` set, the rating is read as integer rank points and shown
    as a tier label; otherwise it is shown as a rating with one decimal.
    """

    def __init__(
        self, endpoints: PuddleAPIEndpoints, site_name: str, ranked: bool = False
    ):
        self.endpoints = endpoints
        self.site_name = site_name
        self.ranked = ranked

    def describe(self, rating: RatingEntry) -> str:
        if self.ranked:
            rank = classify(int(rating.rating))
            return f"{rank} | Games: {rating.match_count}"
        return f"Rating: {rating.rating:.1f} | Games: {rating.match_count}"

    def render(
        self, player_id: int, player: PlayerRecord, rating: RatingEntry
    ) -> RenderedPreview:
        document = OPENGRAPH_TEMPLATE.format(
            title=html.escape(f"{player.name} - {rating.character}"),
            description=html.escape(self.describe(rating)),
            site_name=html.escape(self.site_name),
            url=html.escape(self.endpoints.player_page(player_id, rating.char_short)),
            image=html.escape(self.endpoints.avatar(player_id)),
            player_name=html.escape(player.name),
        )
        return RenderedPreview(content=document, media_type=HTML_MEDIA_TYPE)


class DiscordEmbedRenderer:
    """Discord embed with the rating and game count as inline fields."""

    def __init__(self, double_encoded: bool = True):
        self.double_encoded = double_encoded

    @staticmethod
    def build_embed(player: PlayerRecord, rating: RatingEntry) -> DiscordEmbed:
        value = f"{rating.rating:.1f}"
        if rating.deviation is not None:
            value = f"{value} ±{rating.deviation:.1f}"

        return DiscordEmbed(
            title=player.name,
            description=EMBED_DESCRIPTION,
            color=EMBED_COLOR,
            fields=[
                EmbedField(name=rating.character, value=value, inline=True),
                EmbedField(name="Games", value=str(rating.match_count), inline=True),
            ],
            footer=EmbedFooter(text=EMBED_FOOTER),
        )

    def render(
        self, player_id: int, player: PlayerRecord, rating: RatingEntry
    ) -> RenderedPreview:
        payload = DiscordWebhookPayload(embeds=[self.build_embed(player, rating)])
        document = payload.model_dump_json()
        if self.double_encoded:
            # Consumers expect a JSON string whose value is the serialized payload
            document = json.dumps(document, ensure_ascii=False)
        return RenderedPreview(content=document, media_type=JSON_MEDIA_TYPE)


def build_renderer(settings: Settings) -> PreviewRenderer:
    """Create the renderer for the configured output mode."""
    endpoints = PuddleAPIEndpoints(settings.puddle_api_base_url, settings.puddle_site_url)

    if settings.output_mode == OutputMode.DISCORD_EMBED:
        return DiscordEmbedRenderer(double_encoded=settings.discord_embed_double_encoded)
    return OpenGraphRenderer(
        endpoints,
        site_name=settings.site_name,
        ranked=settings.output_mode == OutputMode.OPENGRAPH_RANKED,
    )
