"""Pydantic schemas for user operations."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UserResponse(BaseModel):
    id: str
    name: str
    email: str


class CorrelationResponse(BaseModel):
    """Correlation id of the current request."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    correlation_id: str
