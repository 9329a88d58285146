"""Pydantic models for puddle.farm API responses."""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class PuddleModel(BaseModel):
    """Base for upstream payloads. Non-finite floats are rejected."""

    model_config = ConfigDict(allow_inf_nan=False)


class PlayerTag(PuddleModel):
    """Styled label shown next to a player's name."""

    tag: str
    style: str


class TopDefeated(PuddleModel):
    """Highest rated opponent a player has beaten with a character."""

    timestamp: str
    id: int
    name: str
    char_short: str
    value: float
    deviation: Optional[float] = None


class TopRating(PuddleModel):
    """Peak rating reached with a character."""

    timestamp: str
    value: float
    deviation: Optional[float] = None


class RatingEntry(PuddleModel):
    """Rating of one player on one character."""

    rating: float = Field(..., description="Rating value, or rank points as an integer")
    deviation: Optional[float] = Field(None, description="Rating uncertainty")
    char_short: str = Field(..., description="Character short code, e.g. SO")
    character: str = Field(..., description="Character full name")
    match_count: int = Field(..., ge=0)
    top_char: int
    top_defeated: TopDefeated
    top_rating: TopRating


class PlayerRecord(PuddleModel):
    """Player profile as returned by /api/player/{id}."""

    id: int
    name: str
    ratings: List[RatingEntry]
    platform: str
    top_global: int
    tags: List[Union[PlayerTag, str]]
