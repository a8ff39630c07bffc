"""FastAPI dependencies for dependency injection.

Provides:
- Request-scoped database session
- Product gateway built on that session
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from inventory.infra.database import get_db_session
from inventory.repositories import ProductGateway, ProductRepository


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session that lives for one request."""
    async with get_db_session() as session:
        yield session


async def get_product_repository(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProductGateway:
    """Build the product gateway for this request.

    Tests override this dependency to swap in another gateway.
    """
    return ProductRepository(db)


# Type alias for cleaner annotations
Products = Annotated[ProductGateway, Depends(get_product_repository)]
