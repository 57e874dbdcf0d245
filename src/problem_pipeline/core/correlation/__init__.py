"""Request correlation ids."""

from problem_pipeline.core.correlation.context import (
    bind_correlation_id,
    get_correlation_id,
    peek_correlation_id,
    resolve_correlation_id,
    unbind_correlation_id,
)
from problem_pipeline.core.correlation.middleware import CorrelationIdMiddleware


__all__ = [
    "CorrelationIdMiddleware",
    "bind_correlation_id",
    "get_correlation_id",
    "peek_correlation_id",
    "resolve_correlation_id",
    "unbind_correlation_id",
]
