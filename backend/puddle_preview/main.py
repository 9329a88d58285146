"""Main FastAPI application for the player preview service."""

from contextlib import asynccontextmanager
from typing import Any, Dict

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from puddle_preview import __version__
from puddle_preview.core import (
    CharacterNotFoundError,
    get_global_settings,
    setup_logging,
)
from puddle_preview.core.puddle_api import PuddleAPIClient, PuddleAPIError
from puddle_preview.features.players import players_router
from puddle_preview.middleware import PerformanceMiddleware

# Configure logging
settings = get_global_settings()
setup_logging(settings.log_level, json_logs=not settings.debug)
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting up player preview service",
        output_mode=settings.output_mode.value,
        upstream=settings.puddle_api_base_url,
    )
    app.state.puddle_client = PuddleAPIClient(
        base_url=settings.puddle_api_base_url, site_url=settings.puddle_site_url
    )
    await app.state.puddle_client.start_session()
    yield
    logger.info("Shutting down player preview service")
    await app.state.puddle_client.close()


async def puddle_api_error_handler(
    request: Request, exc: PuddleAPIError
) -> PlainTextResponse:
    """Map fetch/read/decode failures to a stage-tagged 500."""
    logger.error(
        "Player lookup failed",
        stage=exc.tag,
        player_id=exc.player_id,
        error_type=type(exc).__name__,
    )
    return PlainTextResponse(str(exc), status_code=exc.status_code)


async def character_not_found_handler(
    request: Request, exc: CharacterNotFoundError
) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)


# Create FastAPI application
app = FastAPI(
    title="puddle.farm Player Previews",
    description="Link-preview documents for puddle.farm player ratings.",
    version=__version__,
    lifespan=lifespan,
    debug=settings.debug,
)

app.add_exception_handler(PuddleAPIError, puddle_api_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(CharacterNotFoundError, character_not_found_handler)  # type: ignore[arg-type]

app.add_middleware(PerformanceMiddleware)

app.include_router(players_router)


@app.get("/health", tags=["health"])
async def health_check() -> Dict[str, Any]:
    """
    Health check endpoint.

    Reports the application version and which preview format this
    deployment serves. Does not call the upstream API.
    """
    return {
        "status": "healthy",
        "version": __version__,
        "output_mode": settings.output_mode.value,
    }


def run() -> None:
    """Run the service under uvicorn."""
    import uvicorn

    uvicorn.run(
        "puddle_preview.main:app",
        host=settings.host,
        port=settings.port,
        workers=settings.workers,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
