"""Request logging middleware.

This module provides middleware for logging all HTTP requests and responses
with structured logging via structlog.
"""

import time
from typing import Any

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from problem_pipeline.core.constants import QUIET_PATHS


logger = structlog.get_logger()


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs HTTP requests and their outcome.

    Runs inside ``ExceptionHandlingMiddleware``, so a failed request is
    logged here as ``request_aborted`` and the failure itself is re-raised
    for conversion. The correlation id comes from the structlog context.
    """

    def __init__(
        self,
        app: Any,
        exclude_paths: tuple[str, ...] | list[str] | None = None,
    ) -> None:
        """Initialize the middleware.

        Args:
            app: The ASGI application
            exclude_paths: Path prefixes to exclude from logging
        """
        super().__init__(app)
        self.exclude_paths = tuple(exclude_paths or QUIET_PATHS)

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Process the request and log details.

        Args:
            request: The incoming request
            call_next: The next middleware/handler

        Returns:
            The response from the handler
        """
        if request.url.path.startswith(self.exclude_paths):
            return await call_next(request)

        start_time = time.perf_counter()
        method = request.method
        path = request.url.path

        log_data: dict[str, Any] = {"method": method, "path": path}
        if request.url.query:
            log_data["query"] = str(request.url.query)
        if request.client:
            log_data["client_ip"] = request.client.host

        logger.info("request_started", **log_data)

        try:
            response = await call_next(request)
        except Exception:
            logger.info(
                "request_aborted",
                method=method,
                path=path,
                duration_ms=_elapsed_ms(start_time),
            )
            raise

        completion_data: dict[str, Any] = {
            "method": method,
            "path": path,
            "status_code": response.status_code,
            "duration_ms": _elapsed_ms(start_time),
        }

        # Choose log level based on status code
        if response.status_code >= 500:
            logger.error("request_completed", **completion_data)
        elif response.status_code >= 400:
            logger.warning("request_completed", **completion_data)
        else:
            logger.info("request_completed", **completion_data)

        return response


def _elapsed_ms(start_time: float) -> float:
    return round((time.perf_counter() - start_time) * 1000, 2)
