"""Products module demonstrating each failure kind."""

from fastapi import APIRouter


router = APIRouter(prefix="/products", tags=["products"])

# Import routes to register them (must be after router is defined)
from problem_pipeline.modules.products import routes  # noqa: F401, E402
