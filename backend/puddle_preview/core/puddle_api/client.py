"""puddle.farm API HTTP client with stage-tagged error handling."""

import asyncio
from typing import Optional

import httpx
import structlog
from pydantic import ValidationError

from .endpoints import PuddleAPIEndpoints
from .errors import BodyReadError, DecodeError, PuddleAPIError, TransportError
from .models import PlayerRecord

logger = structlog.get_logger(__name__)


class PuddleAPIClient:
    """Async client for the puddle.farm player API.

    Every call performs exactly one request. Nothing is retried or cached.
    """

    def __init__(
        self,
        base_url: str = "https://puddle.farm",
        site_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Base URL of the statistics API
            site_url: Public site URL used for links (defaults to base_url)
            transport: Optional httpx transport, mainly for tests
        """
        self.endpoints = PuddleAPIEndpoints(base_url, site_url or base_url)
        self._transport = transport

        # HTTP session
        self.session: Optional[httpx.AsyncClient] = None
        self._session_lock = asyncio.Lock()

    async def __aenter__(self):
        """Async context manager entry."""
        await self.start_session()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def start_session(self) -> None:
        """Start the httpx session."""
        if self.session is None or self.session.is_closed:
            async with self._session_lock:
                if self.session is None or self.session.is_closed:
                    headers = {
                        "Accept": "application/json",
                        "User-Agent": "puddle-preview/0.1",
                    }
                    self.session = httpx.AsyncClient(
                        headers=headers,
                        transport=self._transport,
                        follow_redirects=True,
                    )

                    logger.info(
                        "puddle.farm client session started",
                        api_base_url=self.endpoints.api_base_url,
                    )

    async def close(self) -> None:
        """Close the httpx session."""
        if self.session and not self.session.is_closed:
            await self.session.aclose()
            logger.info("puddle.farm client session closed")

    async def _fetch_text(self, url: str, player_id: int) -> str:
        """GET a URL and return its body as text.

        Raises:
            TransportError: The request failed before a response arrived
            BodyReadError: The response body could not be read
        """
        await self.start_session()

        if self.session is None:
            raise PuddleAPIError("Session not initialized", player_id=player_id)

        try:
            request = self.session.build_request("GET", url)
            response = await self.session.send(request, stream=True)
        except httpx.HTTPError as e:
            logger.warning(
                "Upstream request failed",
                url=url,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise TransportError(str(e), player_id=player_id, original_error=e)

        try:
            await response.aread()
            body = response.text
        except httpx.HTTPError as e:
            logger.warning(
                "Reading upstream body failed",
                url=url,
                status_code=response.status_code,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise BodyReadError(str(e), player_id=player_id, original_error=e)
        finally:
            await response.aclose()

        if response.status_code != 200:
            # Decoding still decides the outcome; the status is only logged.
            logger.warning(
                "Upstream returned non-success status",
                url=url,
                status_code=response.status_code,
            )

        return body

    async def get_player(self, player_id: int) -> PlayerRecord:
        """Fetch and decode a player record.

        Raises:
            TransportError, BodyReadError: see _fetch_text
            DecodeError: The body is not a valid player record
        """
        url = self.endpoints.player(player_id)
        logger.debug("Fetching player from puddle.farm", player_id=player_id)

        body = await self._fetch_text(url, player_id)

        try:
            return PlayerRecord.model_validate_json(body)
        except ValidationError as e:
            logger.warning(
                "Upstream body is not a player record",
                player_id=player_id,
                error_count=e.error_count(),
            )
            raise DecodeError(str(e), body, player_id=player_id, original_error=e)
