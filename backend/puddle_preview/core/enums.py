"""Shared enums used across features.

This module provides a single source of truth for enums used in both settings and renderers.
"""

from enum import Enum


class OutputMode(str, Enum):
    """Presentation format served by a deployment."""

    OPENGRAPH = "opengraph"
    OPENGRAPH_RANKED = "opengraph_ranked"
    DISCORD_EMBED = "discord_embed"
