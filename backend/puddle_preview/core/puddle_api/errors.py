"""Custom error classes for the puddle.farm API client."""

from typing import Optional


class PuddleAPIError(Exception):
    """Base exception for upstream failures, tagged with the stage that failed."""

    tag: str = "E0"
    status_code: int = 500

    def __init__(
        self,
        message: str,
        player_id: Optional[int] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        """
        Initialize PuddleAPIError.

        Args:
            message: Error message
            player_id: Player whose record was being fetched
            original_error: Underlying httpx or pydantic error
        """
        super().__init__(message)
        self.message: str = message
        self.player_id: Optional[int] = player_id
        self.original_error: Optional[Exception] = original_error

    def __str__(self) -> str:
        """Return the stage-tagged diagnostic sent back to the caller."""
        return f"{self.tag} {self.message}"


class TransportError(PuddleAPIError):
    """Request could not be sent or no response was received."""

    tag = "E1"


class BodyReadError(PuddleAPIError):
    """Response arrived but its body could not be read."""

    tag = "E2"


class DecodeError(PuddleAPIError):
    """Body is not a valid player record. Echoes the raw body."""

    tag = "E3"

    def __init__(
        self,
        message: str,
        body: str,
        player_id: Optional[int] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, player_id=player_id, original_error=original_error)
        self.body: str = body

    def __str__(self) -> str:
        return f"{self.tag} {self.message} : {self.body}"
