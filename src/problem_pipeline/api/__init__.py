"""HTTP API routers."""

from problem_pipeline.api.router import api_router


__all__ = ["api_router"]
