"""Product service with in-memory demo data."""

import asyncio
from decimal import Decimal
from typing import Annotated

import structlog
from fastapi import Depends

from problem_pipeline.core.errors import (
    AppException,
    NotFoundError,
    ValidationFailureError,
)
from problem_pipeline.modules.products.schemas import ProductCreate, ProductResponse


logger = structlog.get_logger()

MAX_PRODUCT_ID = 100
DEFAULT_PRICE = Decimal("99.99")


class ProductService:
    """Business logic for the product endpoints."""

    async def get_product(self, product_id: int) -> ProductResponse:
        """Look up a product.

        Raises:
            ValidationFailureError: If the id is not positive
            NotFoundError: If no product has this id
        """
        logger.info("product_lookup", product_id=product_id)

        if product_id <= 0:
            raise ValidationFailureError("id", "Product ID must be greater than 0")
        if product_id > MAX_PRODUCT_ID:
            raise NotFoundError("Product", product_id)

        return ProductResponse(
            id=product_id, name=f"Product {product_id}", price=DEFAULT_PRICE
        )

    async def create_product(self, data: ProductCreate) -> ProductResponse:
        """Create a product after checking every field.

        Raises:
            ValidationFailureError: With one entry per invalid field
        """
        logger.info("product_create", name=data.name)

        errors: dict[str, list[str]] = {}
        if not data.name.strip():
            errors["name"] = ["Product name is required"]
        if data.price <= 0:
            errors["price"] = ["Price must be greater than 0"]
        if errors:
            raise ValidationFailureError(errors)

        return ProductResponse(id=1, name=data.name, price=data.price)

    async def fail_with_status(self) -> None:
        raise AppException("A custom application error occurred", status_code=503)

    async def fail_unexpectedly(self) -> None:
        """Fail from nested asynchronous work with an unexpected error."""
        await asyncio.gather(self._load_pricing_rules())

    async def fail_with_cause(self) -> None:
        try:
            await self._load_pricing_rules()
        except RuntimeError as exc:
            raise AppException(
                "Pricing service call failed", cause=exc, status_code=502
            ) from exc

    async def _load_pricing_rules(self) -> None:
        await asyncio.sleep(0)
        raise RuntimeError("Pricing rules cache is not initialized")


def get_product_service() -> ProductService:
    return ProductService()


ProductSvc = Annotated[ProductService, Depends(get_product_service)]
