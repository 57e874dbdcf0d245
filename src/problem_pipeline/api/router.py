"""Root API router with health endpoints and module mounting."""

from fastapi import APIRouter
from pydantic import BaseModel

from problem_pipeline.modules import discover_modules


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str


# Create root API router
api_router = APIRouter()

# Health check endpoints (no /api prefix)
health_router = APIRouter(tags=["health"])


@health_router.get(
    "/health/live",
    response_model=HealthResponse,
    summary="Liveness probe",
    description="Returns 200 if the process is running.",
)
async def liveness() -> HealthResponse:
    """Liveness probe endpoint."""
    return HealthResponse(status="alive")


# Feature modules live under /api
feature_router = APIRouter(prefix="/api")

for module_router in discover_modules():
    feature_router.include_router(module_router)

api_router.include_router(health_router)
api_router.include_router(feature_router)
