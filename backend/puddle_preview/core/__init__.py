"""Core infrastructure module.

This module exports core utilities used across features.
Never imports from features - only from external libraries.
"""

from .config import Settings, get_settings, get_global_settings
from .enums import OutputMode
from .exceptions import ServiceException, CharacterNotFoundError
from .logging import setup_logging

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "get_global_settings",
    # Enums
    "OutputMode",
    # Exceptions
    "ServiceException",
    "CharacterNotFoundError",
    # Logging
    "setup_logging",
]
