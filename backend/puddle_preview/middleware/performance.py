"""Request timing middleware for API response tracking."""

import time
import uuid

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp
from structlog import contextvars as structlog_contextvars

logger = structlog.get_logger(__name__)


class PerformanceMiddleware(BaseHTTPMiddleware):
    """Middleware that logs every request with its duration."""

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 2.0):
        """
        Initialize performance middleware.

        Args:
            app: ASGI application
            slow_request_threshold: Seconds after which a request is logged as slow
        """
        super().__init__(app)
        self.slow_request_threshold: float = slow_request_threshold

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """
        Process incoming request with timing.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/endpoint handler

        Returns:
            HTTP response
        """
        start_time = time.perf_counter()
        request_id = f"req_{uuid.uuid4().hex[:12]}"

        structlog_contextvars.clear_contextvars()
        structlog_contextvars.bind_contextvars(
            request_id=request_id, method=request.method, path=request.url.path
        )

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.perf_counter() - start_time
            logger.error(
                "Request failed",
                duration_seconds=round(duration, 3),
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        duration = time.perf_counter() - start_time

        logger.info(
            "Request completed",
            status_code=response.status_code,
            duration_ms=round(duration * 1000),
        )

        if duration > self.slow_request_threshold:
            logger.warning(
                "Slow request detected",
                duration_seconds=round(duration, 3),
                threshold=self.slow_request_threshold,
            )

        response.headers["X-Response-Time"] = f"{duration:.3f}s"
        response.headers["X-Request-ID"] = request_id
        return response
