"""Error handling module with RFC 7807 Problem Details."""

from problem_pipeline.core.errors.converter import PROBLEM_TYPES, ProblemType, convert
from problem_pipeline.core.errors.exceptions import (
    AppException,
    FailureKind,
    NotFoundError,
    ValidationFailureError,
    classify,
    wrapped_cause,
)
from problem_pipeline.core.errors.handlers import register_exception_handlers
from problem_pipeline.core.errors.middleware import (
    ExceptionHandlingMiddleware,
    diagnostic_extensions,
)
from problem_pipeline.core.errors.problem import ProblemDocument, ProblemJSONResponse


__all__ = [
    "PROBLEM_TYPES",
    # Exceptions
    "AppException",
    # Middleware
    "ExceptionHandlingMiddleware",
    "FailureKind",
    "NotFoundError",
    # Problem documents
    "ProblemDocument",
    "ProblemJSONResponse",
    "ProblemType",
    "ValidationFailureError",
    "classify",
    "convert",
    "diagnostic_extensions",
    "register_exception_handlers",
    "wrapped_cause",
]
