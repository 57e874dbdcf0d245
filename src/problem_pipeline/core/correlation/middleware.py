"""Correlation id middleware."""

from typing import TYPE_CHECKING

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from problem_pipeline.core.constants import CORRELATION_ID_HEADER
from problem_pipeline.core.correlation.context import (
    bind_correlation_id,
    resolve_correlation_id,
    unbind_correlation_id,
)


if TYPE_CHECKING:
    from starlette.types import ASGIApp


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware that assigns a correlation id to each request.

    The id is taken from the incoming header when present, otherwise
    generated, and added to:
    - request.state.correlation_id
    - Structlog context
    - The same header on the response

    Must wrap ``ExceptionHandlingMiddleware`` so error responses carry the
    id too.
    """

    def __init__(
        self,
        app: "ASGIApp",
        header_name: str = CORRELATION_ID_HEADER,
    ) -> None:
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Assign the correlation id, then process the request.

        Args:
            request: The incoming request
            call_next: The next middleware/handler

        Returns:
            The response with the correlation id header
        """
        correlation_id = resolve_correlation_id(request.headers, self.header_name)
        bind_correlation_id(request, correlation_id)
        try:
            response = await call_next(request)
        finally:
            unbind_correlation_id()

        response.headers[self.header_name] = correlation_id
        return response
