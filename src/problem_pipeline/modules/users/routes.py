"""User API routes."""

import structlog
from fastapi import Request

from problem_pipeline.core.correlation import get_correlation_id
from problem_pipeline.core.errors import NotFoundError, ValidationFailureError
from problem_pipeline.modules.users import router
from problem_pipeline.modules.users.schemas import CorrelationResponse, UserResponse


logger = structlog.get_logger()

KNOWN_USER = UserResponse(id="123", name="John Doe", email="john.doe@example.com")


@router.get(
    "/correlation",
    response_model=CorrelationResponse,
    response_model_by_alias=True,
    summary="Current correlation id",
    description="Returns the correlation id assigned to this request.",
)
async def get_correlation(request: Request) -> CorrelationResponse:
    return CorrelationResponse(correlation_id=get_correlation_id(request))


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user",
    description="Only user 123 exists.",
)
async def get_user(user_id: str) -> UserResponse:
    """Get a user by ID."""
    logger.info("user_lookup", user_id=user_id)

    if not user_id.strip():
        raise ValidationFailureError("id", "User ID cannot be empty")
    if user_id != KNOWN_USER.id:
        raise NotFoundError("User", user_id)

    return KNOWN_USER
