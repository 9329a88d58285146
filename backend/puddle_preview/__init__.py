"""
puddle.farm player preview service.

Renders link-preview documents (Open Graph HTML or Discord embeds) for a
player's rating on one character.
"""

__version__ = "0.1.0"
