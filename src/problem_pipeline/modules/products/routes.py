"""Product API routes.

Static paths are registered before ``/{product_id}`` so they are not
parsed as ids.
"""

from fastapi import status

from problem_pipeline.modules.products import router
from problem_pipeline.modules.products.schemas import ProductCreate, ProductResponse
from problem_pipeline.modules.products.services import ProductSvc


@router.get(
    "/error",
    summary="Application error",
    description="Always fails with a 503 application error.",
)
async def trigger_error(service: ProductSvc) -> None:
    await service.fail_with_status()


@router.get(
    "/unhandled",
    summary="Unhandled error",
    description="Always fails with an unexpected error from nested async work.",
)
async def trigger_unhandled(service: ProductSvc) -> None:
    await service.fail_unexpectedly()


@router.get(
    "/wrapped",
    summary="Wrapped error",
    description="Always fails with a 502 application error wrapping its cause.",
)
async def trigger_wrapped(service: ProductSvc) -> None:
    await service.fail_with_cause()


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Get product",
    description="Ids up to 100 exist; ids below 1 are invalid.",
)
async def get_product(product_id: int, service: ProductSvc) -> ProductResponse:
    """Get a product by ID."""
    return await service.get_product(product_id)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create product",
)
async def create_product(data: ProductCreate, service: ProductSvc) -> ProductResponse:
    """Create a new product."""
    return await service.create_product(data)
