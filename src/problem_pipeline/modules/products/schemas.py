"""Pydantic schemas for product operations."""

from decimal import Decimal

from pydantic import BaseModel


class ProductCreate(BaseModel):
    """Product creation payload.

    Fields are deliberately lenient; business rules are checked by
    ``ProductService`` and reported as a validation failure.
    """

    name: str = ""
    price: Decimal = Decimal(0)


class ProductResponse(BaseModel):
    id: int
    name: str
    price: Decimal
