"""Core services and cross-cutting concerns."""

from problem_pipeline.core.correlation import (
    CorrelationIdMiddleware,
    get_correlation_id,
)
from problem_pipeline.core.errors import (
    AppException,
    ExceptionHandlingMiddleware,
    NotFoundError,
    ValidationFailureError,
    register_exception_handlers,
)


__all__ = [
    # Errors
    "AppException",
    # Middleware
    "CorrelationIdMiddleware",
    "ExceptionHandlingMiddleware",
    "NotFoundError",
    "ValidationFailureError",
    # Correlation
    "get_correlation_id",
    "register_exception_handlers",
]
