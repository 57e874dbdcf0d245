"""Users module demonstrating lookups and correlation id access."""

from fastapi import APIRouter


router = APIRouter(prefix="/users", tags=["users"])

# Import routes to register them (must be after router is defined)
from problem_pipeline.modules.users import routes  # noqa: F401, E402
