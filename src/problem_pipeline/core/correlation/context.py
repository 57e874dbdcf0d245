"""Per-request correlation id.

The id lives in ``request.state`` and in structlog's context variables,
both scoped to the request being handled. Nothing here is shared between
requests.
"""

import uuid

import structlog
from starlette.datastructures import Headers
from starlette.requests import Request

from problem_pipeline.core.constants import (
    CORRELATION_ID_HEADER,
    CORRELATION_ID_STATE_KEY,
    MISSING_CORRELATION_ID,
)


def resolve_correlation_id(
    headers: Headers, header_name: str = CORRELATION_ID_HEADER
) -> str:
    """Reuse the caller's correlation id or generate a new one.

    Any non-blank header value is accepted verbatim so trace ids survive
    across service boundaries.
    """
    incoming = headers.get(header_name)
    if incoming and incoming.strip():
        return incoming
    return str(uuid.uuid4())


def bind_correlation_id(request: Request, correlation_id: str) -> None:
    """Store the id in request state and the log context."""
    setattr(request.state, CORRELATION_ID_STATE_KEY, correlation_id)
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)


def unbind_correlation_id() -> None:
    structlog.contextvars.unbind_contextvars("correlation_id")


def peek_correlation_id(request: Request) -> str | None:
    """Return the request's correlation id, or None if none was assigned."""
    return getattr(request.state, CORRELATION_ID_STATE_KEY, None)


def get_correlation_id(request: Request) -> str:
    """Return the request's correlation id, or ``"N/A"`` if none was assigned."""
    return peek_correlation_id(request) or MISSING_CORRELATION_ID
