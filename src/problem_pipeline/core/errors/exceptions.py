"""Domain exceptions for the application.

Business code raises these to ask for a specific, intentional error
response. They propagate untouched to ``ExceptionHandlingMiddleware``,
which converts them to RFC 7807 Problem Details. Anything else that
escapes a handler is an unclassified failure and is reported as a
generic 500.
"""

from collections.abc import Iterable, Mapping
from enum import StrEnum
from typing import Any


class FailureKind(StrEnum):
    """Discriminant for the closed set of failure kinds."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    APPLICATION = "application"
    UNCLASSIFIED = "unclassified"


class AppException(Exception):
    """Base exception for intentional business-rule failures.

    The status code is fixed at construction and reported verbatim.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code for the response
        cause: Wrapped failure, also chained as ``__cause__``
        headers: Extra headers for the error response

    Example:
        raise AppException("Inventory service unavailable", status_code=503)
        raise AppException("Pricing failed", cause=exc, status_code=502)
    """

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        status_code: int = 500,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.headers: dict[str, str] = dict(headers or {})
        # Stored separately: middleware re-raising rewrites __cause__
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class ValidationFailureError(AppException):
    """Raised when caller input fails validation.

    Accepts either a full mapping of field name to messages, or a single
    field and message which becomes a one-entry mapping. A bare string
    in the mapping counts as one message.

    Example:
        raise ValidationFailureError({"name": ["Product name is required"]})
        raise ValidationFailureError("id", "Product ID must be greater than 0")
    """

    def __init__(
        self,
        errors: Mapping[str, Iterable[str]] | str,
        message: str | None = None,
    ) -> None:
        if isinstance(errors, str):
            if message is None:
                raise TypeError("a single-field validation failure needs a message")
            self.errors: dict[str, list[str]] = {errors: [message]}
            summary = "Validation failure occurred."
        else:
            self.errors = {
                field: [messages] if isinstance(messages, str) else list(messages)
                for field, messages in errors.items()
            }
            summary = message or "One or more validation failures have occurred."
        super().__init__(summary, status_code=400)


class NotFoundError(AppException):
    """Raised when a requested resource is not found.

    Example:
        raise NotFoundError("Product", 150)
        raise NotFoundError(message="No active price list")
    """

    def __init__(
        self,
        resource: str | None = None,
        key: Any = None,
        message: str | None = None,
    ) -> None:
        if message is None:
            if resource is None:
                raise TypeError("NotFoundError needs a resource name or a message")
            message = f"{resource} with id '{key}' was not found."
        self.resource = resource
        self.key = key
        super().__init__(message, status_code=404)


def classify(exc: BaseException) -> FailureKind:
    """Return the failure kind of an exception, most specific first."""
    match exc:
        case ValidationFailureError():
            return FailureKind.VALIDATION
        case NotFoundError():
            return FailureKind.NOT_FOUND
        case AppException():
            return FailureKind.APPLICATION
        case _:
            return FailureKind.UNCLASSIFIED


def wrapped_cause(exc: BaseException) -> BaseException | None:
    """Return the failure an exception wraps, if it wraps one.

    An explicit ``AppException`` cause wins. Otherwise ``__cause__`` is used,
    except for exception groups, which Starlette's ``BaseHTTPMiddleware``
    chains onto every exception it re-raises from its task group.
    """
    if isinstance(exc, AppException) and exc.cause is not None:
        return exc.cause
    cause = exc.__cause__
    if isinstance(cause, BaseExceptionGroup):
        return None
    return cause
