"""Bridges from framework exceptions to the application's failure kinds.

FastAPI resolves these exceptions inside the router with its own handlers.
Each handler here re-raises the equivalent domain exception instead, so
``ExceptionHandlingMiddleware`` stays the only place that builds error
responses.
"""

from collections import defaultdict
from typing import TYPE_CHECKING, NoReturn, cast

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from problem_pipeline.core.errors.exceptions import (
    AppException,
    NotFoundError,
    ValidationFailureError,
)


if TYPE_CHECKING:
    from starlette.types import ExceptionHandler


def field_errors(exc: RequestValidationError) -> dict[str, list[str]]:
    """Group Pydantic errors by dotted field path."""
    errors: dict[str, list[str]] = defaultdict(list)
    for error in exc.errors():
        # Skip "body" prefix in field path
        parts = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(parts) if parts else "request"
        errors[field].append(error.get("msg", "Invalid value"))
    return dict(errors)


async def validation_exception_handler(
    _request: Request, exc: RequestValidationError
) -> NoReturn:
    """Re-raise request validation errors as a validation failure."""
    raise ValidationFailureError(field_errors(exc)) from exc


async def http_exception_handler(
    _request: Request, exc: StarletteHTTPException
) -> NoReturn:
    """Re-raise routing and HTTP errors with their own status code and headers."""
    if exc.status_code == 404:
        failure: AppException = NotFoundError(message=str(exc.detail))
    else:
        failure = AppException(str(exc.detail), status_code=exc.status_code)
    failure.headers.update(exc.headers or {})
    raise failure from exc


def register_exception_handlers(app: FastAPI) -> None:
    """Register the framework exception bridges with the FastAPI app.

    Call this function during app initialization:

        app = FastAPI()
        register_exception_handlers(app)
    """
    app.add_exception_handler(
        RequestValidationError, cast("ExceptionHandler", validation_exception_handler)
    )
    app.add_exception_handler(
        StarletteHTTPException, cast("ExceptionHandler", http_exception_handler)
    )
