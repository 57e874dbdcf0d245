"""Structlog configuration."""

import logging

import structlog

from problem_pipeline.config import Settings


def configure_logging(settings: Settings) -> None:
    """Configure structlog for the application.

    Log lines are JSON in production and human-readable elsewhere. Values
    bound with ``structlog.contextvars`` (such as ``correlation_id``) are
    merged into every line.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            (
                structlog.processors.JSONRenderer()
                if settings.is_production
                else structlog.dev.ConsoleRenderer()
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.log_level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
