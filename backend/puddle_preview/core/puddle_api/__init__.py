"""
puddle.farm API client package.

This package provides an async HTTP client for the puddle.farm statistics API,
the response models it decodes into, and the errors each fetch stage raises.
"""

from .client import PuddleAPIClient
from .errors import (
    PuddleAPIError,
    TransportError,
    BodyReadError,
    DecodeError,
)
from .models import (
    PlayerRecord,
    RatingEntry,
    TopDefeated,
    TopRating,
    PlayerTag,
)
from .endpoints import PuddleAPIEndpoints

__all__ = [
    "PuddleAPIClient",
    "PuddleAPIError",
    "TransportError",
    "BodyReadError",
    "DecodeError",
    "PlayerRecord",
    "RatingEntry",
    "TopDefeated",
    "TopRating",
    "PlayerTag",
    "PuddleAPIEndpoints",
]
