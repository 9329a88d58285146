"""
Pytest fixtures shared by all tests.
"""

import json
from typing import Callable

import httpx
import pytest

from puddle_preview.core.puddle_api import PlayerRecord, PuddleAPIClient


@pytest.fixture
def sample_rating_data():
    """Sample rating entry for Sol."""
    return {
        "rating": 15800.0,
        "deviation": 74.3,
        "char_short": "SO",
        "character": "Sol",
        "match_count": 120,
        "top_char": 412,
        "top_defeated": {
            "timestamp": "2024-05-01 18:22:10",
            "id": 2211000000000000,
            "name": "Bar",
            "char_short": "KY",
            "value": 16500.0,
            "deviation": 80.1,
        },
        "top_rating": {
            "timestamp": "2024-05-02 20:01:44",
            "value": 16120.0,
            "deviation": 71.9,
        },
    }


@pytest.fixture
def sample_player_data(sample_rating_data):
    """Sample player record with two characters."""
    ky_rating = dict(sample_rating_data)
    ky_rating.update(
        {"rating": 13050.0, "char_short": "KY", "character": "Ky", "match_count": 33}
    )
    return {
        "id": 1,
        "name": "Foo",
        "ratings": [sample_rating_data, ky_rating],
        "platform": "PC",
        "top_global": 0,
        "tags": [{"tag": "Hall of Fame", "style": "gold"}],
    }


@pytest.fixture
def sample_player(sample_player_data) -> PlayerRecord:
    return PlayerRecord.model_validate(sample_player_data)


@pytest.fixture
def make_puddle_client() -> Callable[..., PuddleAPIClient]:
    """Build a client whose upstream is answered by a handler function."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> PuddleAPIClient:
        return PuddleAPIClient(
            base_url="https://puddle.test",
            site_url="https://puddle.farm",
            transport=httpx.MockTransport(handler),
        )

    return _make


@pytest.fixture
def json_handler(sample_player_data):
    """Upstream handler returning the sample player as JSON."""

    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text=json.dumps(sample_player_data))

    return _handler
