"""Rank tiers for rank-point ratings.

Ratings are compared against a fixed table, highest threshold first. The
top tier, Vanquisher, is reported by the API with VANQUISHER_OFFSET added
to the rating, which keeps it above every other threshold. The offset is
removed only when the value is displayed.
"""

from dataclasses import dataclass
from typing import Tuple

VANQUISHER = "Vanquisher"
PLACEMENT = "Placement"
VANQUISHER_OFFSET = 10_000_000

RANK_POINTS_UNIT = "RP"
DOMINANCE_RATING_UNIT = "DR"

# (threshold, label), descending. Must end with the 0 threshold.
RANK_THRESHOLDS: Tuple[Tuple[int, str], ...] = (
    (45000, VANQUISHER),
    (40800, "Diamond 3"),
    (36000, "Diamond 2"),
    (32400, "Diamond 1"),
    (28400, "Platinum 3"),
    (24400, "Platinum 2"),
    (20400, "Platinum 1"),
    (18000, "Gold 3"),
    (15600, "Gold 2"),
    (13200, "Gold 1"),
    (11000, "Silver 3"),
    (8800, "Silver 2"),
    (6600, "Silver 1"),
    (5400, "Bronze 3"),
    (4200, "Bronze 2"),
    (3000, "Bronze 1"),
    (2000, "Iron 3"),
    (1000, "Iron 2"),
    (1, "Iron 1"),
    (0, PLACEMENT),
)


@dataclass(frozen=True)
class RankLabel:
    """A classified rating, ready for display."""

    tier: str
    value: int
    unit: str

    @property
    def display_rating(self) -> str:
        """Rating with its unit, e.g. '15800 RP'."""
        return f"{self.value} {self.unit}"

    def __str__(self) -> str:
        return f"{self.tier}, {self.display_rating}"


def rank_tier(rating: int) -> str:
    """Return the tier label for a raw rating.

    Negative ratings fall through to Placement.
    """
    for threshold, label in RANK_THRESHOLDS:
        if rating >= threshold:
            return label
    return PLACEMENT


def classify(rating: int) -> RankLabel:
    """Classify a raw rating and compute the value shown next to the tier."""
    tier = rank_tier(rating)
    if tier == VANQUISHER:
        value = rating - VANQUISHER_OFFSET if rating >= VANQUISHER_OFFSET else rating
        return RankLabel(tier=tier, value=value, unit=DOMINANCE_RATING_UNIT)
    return RankLabel(tier=tier, value=rating, unit=RANK_POINTS_UNIT)
