"""SQLAlchemy-backed product repository.

Every mutating call commits before returning; no transaction spans calls.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory.infra.logging import get_logger
from inventory.models.product import Product
from inventory.repositories.base import ProductGateway

logger = get_logger(__name__)

# Range of the 32-bit `Id` column. Ids outside it can never be stored.
ID_MIN = -(2**31)
ID_MAX = 2**31 - 1


def _storable_id(product_id: int | None) -> bool:
    return product_id is not None and ID_MIN <= product_id <= ID_MAX


class ProductRepository(ProductGateway):
    """Product gateway over the `Products` table."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_all(self) -> list[Product]:
        result = await self.session.execute(select(Product))
        return list(result.scalars().all())

    async def get(self, product_id: int) -> Product | None:
        if not _storable_id(product_id):
            return None
        return await self.session.get(Product, product_id)

    async def add(self, product: Product) -> Product:
        self.session.add(product)
        await self.session.commit()
        logger.debug("Product added", product_id=product.id)
        return product

    async def update(self, product: Product) -> Product | None:
        existing = await self.get(product.id)
        if existing is None:
            return None

        existing.name = product.name
        existing.type = product.type
        existing.status = product.status
        await self.session.commit()
        logger.debug("Product updated", product_id=existing.id)
        return existing

    async def delete(self, product_id: int) -> None:
        product = await self.get(product_id)
        if product is None:
            return

        await self.session.delete(product)
        await self.session.commit()
        logger.debug("Product deleted", product_id=product_id)
