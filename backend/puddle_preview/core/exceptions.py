"""
Service layer custom exceptions.

This module defines service-specific exceptions that carry enough context
to be logged and mapped to an HTTP response in one place.
"""

from typing import Any, Dict, Optional


class ServiceException(Exception):
    """Base exception for all service layer errors."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.service = service
        self.operation = operation
        self.context = context or {}
        self.original_error = original_error

    def __str__(self) -> str:
        if self.service and self.operation:
            return f"[{self.service}.{self.operation}] {self.message}"
        return self.message


class CharacterNotFoundError(ServiceException):
    """Raised when a player has no rating entry for the requested character."""

    status_code = 404

    def __init__(self, player_id: int, char_short: str):
        super().__init__(
            message="Character not found",
            service="PlayerPreviewService",
            operation="render_preview",
            context={"player_id": player_id, "char_short": char_short},
        )
