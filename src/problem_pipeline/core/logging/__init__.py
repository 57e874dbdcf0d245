"""Logging module with structured logging and request tracking."""

from problem_pipeline.core.logging.config import configure_logging
from problem_pipeline.core.logging.middleware import RequestLoggingMiddleware


__all__ = [
    "RequestLoggingMiddleware",
    "configure_logging",
]
