"""
Tests for preview renderers.
"""

import json

from puddle_preview.core.config import Settings
from puddle_preview.core.enums import OutputMode
from puddle_preview.core.puddle_api import PuddleAPIEndpoints
from puddle_preview.features.players.renderers import (
    DiscordEmbedRenderer,
    OpenGraphRenderer,
    build_renderer,
)


def make_opengraph(ranked: bool = False) -> OpenGraphRenderer:
    endpoints = PuddleAPIEndpoints("https://puddle.farm", "https://puddle.farm")
    return OpenGraphRenderer(endpoints, site_name="puddle.farm", ranked=ranked)


class TestOpenGraphRenderer:
    """Tests for the Open Graph HTML document"""

    def test_renders_meta_tags(self, sample_player):
        rating = sample_player.ratings[0]

        preview = make_opengraph().render(1, sample_player, rating)

        assert preview.media_type == "text/html"
        assert '<meta property="og:title" content="Foo - Sol" />' in preview.content
        assert 'content="Rating: 15800.0 | Games: 120"' in preview.content
        assert 'og:site_name" content="puddle.farm"' in preview.content
        assert 'og:url" content="https://puddle.farm/player/1/SO"' in preview.content
        assert 'og:image" content="https://puddle.farm/api/avatar/1"' in preview.content
        assert "<p>Player stats for Foo</p>" in preview.content
        assert preview.content.startswith("<!DOCTYPE html>")

    def test_rating_has_one_decimal(self, sample_player):
        rating = sample_player.ratings[0].model_copy(update={"rating": 1234.56})

        preview = make_opengraph().render(1, sample_player, rating)

        assert "Rating: 1234.6 | Games: 120" in preview.content

    def test_ranked_description(self, sample_player):
        rating = sample_player.ratings[0]

        preview = make_opengraph(ranked=True).render(1, sample_player, rating)

        assert 'og:description" content="Gold 2, 15800 RP | Games: 120"' in preview.content

    def test_ranked_vanquisher(self, sample_player):
        rating = sample_player.ratings[0].model_copy(update={"rating": 10045000})

        preview = make_opengraph(ranked=True).render(1, sample_player, rating)

        assert "Vanquisher, 45000 DR | Games: 120" in preview.content

    def test_player_name_is_escaped(self, sample_player):
        player = sample_player.model_copy(update={"name": '<b>"Foo"</b>'})

        preview = make_opengraph().render(1, player, player.ratings[0])

        assert "<b>" not in preview.content
        assert "&lt;b&gt;&quot;Foo&quot;&lt;/b&gt; - Sol" in preview.content


class TestDiscordEmbedRenderer:
    """Tests for the Discord embed payload"""

    def test_double_encoded_payload(self, sample_player):
        preview = DiscordEmbedRenderer().render(1, sample_player, sample_player.ratings[0])

        inner = json.loads(preview.content)
        assert isinstance(inner, str)

        payload = json.loads(inner)
        embed = payload["embeds"][0]
        assert preview.media_type == "application/json"
        assert embed["title"] == "Foo"
        assert embed["description"] == "Guilty Gear -Strive- rating"
        assert embed["color"] == 0x5865F2
        assert embed["footer"] == {"text": "puddle.farm"}
        assert embed["fields"] == [
            {"name": "Sol", "value": "15800.0 ±74.3", "inline": True},
            {"name": "Games", "value": "120", "inline": True},
        ]

    def test_single_encoded_payload(self, sample_player):
        renderer = DiscordEmbedRenderer(double_encoded=False)

        preview = renderer.render(1, sample_player, sample_player.ratings[0])

        payload = json.loads(preview.content)
        assert len(payload["embeds"][0]["fields"]) == 2
        assert payload["embeds"][0]["fields"][1]["name"] == "Games"

    def test_missing_deviation_omits_plus_minus(self, sample_player):
        rating = sample_player.ratings[0].model_copy(update={"deviation": None})

        embed = DiscordEmbedRenderer.build_embed(sample_player, rating)

        assert embed.fields[0].value == "15800.0"


class TestBuildRenderer:
    """Tests for renderer selection by output mode"""

    def test_default_is_plain_opengraph(self):
        renderer = build_renderer(Settings())

        assert isinstance(renderer, OpenGraphRenderer)
        assert renderer.ranked is False

    def test_ranked_mode(self):
        renderer = build_renderer(Settings(output_mode=OutputMode.OPENGRAPH_RANKED))

        assert isinstance(renderer, OpenGraphRenderer)
        assert renderer.ranked is True

    def test_discord_mode(self):
        renderer = build_renderer(
            Settings(output_mode="discord_embed", discord_embed_double_encoded=False)
        )

        assert isinstance(renderer, DiscordEmbedRenderer)
        assert renderer.double_encoded is False
