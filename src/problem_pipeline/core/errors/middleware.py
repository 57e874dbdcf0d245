"""Exception handling middleware.

Converts any failure raised below it into a Problem Details response, so
every request ends with exactly one response: the handler's own, or a
problem document.
"""

import traceback
from typing import TYPE_CHECKING, Any

import structlog
from fastapi import Request, Response
from starlette import status
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from problem_pipeline.core.correlation import get_correlation_id
from problem_pipeline.core.errors.converter import convert
from problem_pipeline.core.errors.exceptions import (
    AppException,
    classify,
    wrapped_cause,
)
from problem_pipeline.core.errors.problem import ProblemDocument, ProblemJSONResponse


if TYPE_CHECKING:
    from starlette.types import ASGIApp


logger = structlog.get_logger()


def diagnostic_extensions(exc: BaseException) -> dict[str, Any]:
    """Exception details attached to problem documents in diagnostic mode."""
    extensions: dict[str, Any] = {"exception": type(exc).__name__}
    if exc.__traceback__ is not None:
        extensions["stackTrace"] = "".join(traceback.format_tb(exc.__traceback__))
    cause = wrapped_cause(exc)
    if cause is not None:
        extensions["innerException"] = str(cause)
    return extensions


class ExceptionHandlingMiddleware(BaseHTTPMiddleware):
    """Middleware that turns failures into RFC 7807 responses.

    Sits directly inside ``CorrelationIdMiddleware`` and outside everything
    else. The failure is logged once with the request's correlation id,
    converted, and, when diagnostics are enabled, enriched with the
    exception name, stack trace and wrapped cause. The ``detail`` of an
    unclassified failure stays generic either way.
    """

    def __init__(self, app: "ASGIApp", diagnostics: bool = False) -> None:
        """Initialize the middleware.

        Args:
            app: The ASGI application
            diagnostics: Whether to expose exception details in responses
        """
        super().__init__(app)
        self.diagnostics = diagnostics

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return self.handle_exception(request, exc)

    def handle_exception(self, request: Request, exc: Exception) -> Response:
        correlation_id = get_correlation_id(request)

        logger.error(
            "request_failed",
            correlation_id=correlation_id,
            failure_kind=classify(exc).value,
            method=request.method,
            path=request.url.path,
            exc_info=exc,
        )

        problem = convert(exc, request)
        if self.diagnostics:
            problem.extensions.update(diagnostic_extensions(exc))

        headers = exc.headers if isinstance(exc, AppException) else None
        return self.render(problem, headers)

    @staticmethod
    def render(
        problem: ProblemDocument, headers: dict[str, str] | None = None
    ) -> Response:
        return ProblemJSONResponse(
            status_code=problem.status or status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=problem.to_content(),
            headers=headers or None,
        )
