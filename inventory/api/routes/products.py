"""Product CRUD endpoints and the stock status aggregate."""

from fastapi import APIRouter, HTTPException, Request, Response, status

from inventory.api.deps import Products
from inventory.infra.logging import get_logger
from inventory.models.product import Product
from inventory.schemas.product import (
    ProductCreate,
    ProductRead,
    ProductStats,
    ProductUpdate,
)
from inventory.services.product_stats import compute_stats

router = APIRouter()
logger = get_logger(__name__)


@router.get("", response_model=list[ProductRead], summary="List all products")
async def list_products(products: Products) -> list[ProductRead]:
    return [ProductRead.model_validate(p) for p in await products.list_all()]


@router.get("/stats", response_model=ProductStats, summary="Count products by status")
async def get_stats(products: Products) -> ProductStats:
    """Total, Defective and Available counts over the whole table.

    Recomputed on every call.
    """
    return compute_stats(await products.list_all())


@router.get("/{product_id}", response_model=ProductRead, summary="Get a product")
async def get_product(product_id: int, products: Products) -> ProductRead:
    product = await products.get(product_id)
    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )
    return ProductRead.model_validate(product)


@router.post(
    "",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a product",
)
async def create_product(
    payload: ProductCreate,
    request: Request,
    response: Response,
    products: Products,
) -> ProductRead:
    """Insert a product and point the Location header at it."""
    product = await products.add(Product(**payload.model_dump()))

    response.headers["Location"] = str(
        request.url_for("get_product", product_id=product.id)
    )
    logger.info("Product created", product_id=product.id, status=product.status)
    return ProductRead.model_validate(product)


@router.put(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Replace a product's fields",
)
async def update_product(
    product_id: int,
    payload: ProductUpdate,
    products: Products,
) -> Response:
    """Overwrite name, type and status.

    Rejected with 400 when the body id differs from the path id, before any
    write. 404 when the product does not exist.
    """
    if payload.id != product_id:
        logger.warning(
            "Product id mismatch",
            path_id=product_id,
            body_id=payload.id,
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Path id does not match body id",
        )

    updated = await products.update(Product(**payload.model_dump()))
    if updated is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )

    logger.info("Product updated", product_id=product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a product",
)
async def delete_product(product_id: int, products: Products) -> Response:
    """Remove a product. Deleting a missing id also returns 204."""
    await products.delete(product_id)
    logger.info("Product deleted", product_id=product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
