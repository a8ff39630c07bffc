"""Demo data for local development."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory.infra.logging import get_logger
from inventory.models.product import Product

logger = get_logger(__name__)

DEMO_PRODUCTS: list[tuple[str, str, str]] = [
    ("Producto 1", "Handmade", "Available"),
    ("Producto 2", "Machine-made", "Defective"),
    ("Producto 3", "Handmade", "Available"),
    ("Producto 4", "Machine-made", "Available"),
    ("Producto 5", "Handmade", "Defective"),
]


async def seed_demo_products(session: AsyncSession) -> int:
    """Insert the demo products if the table is empty.

    Returns:
        Number of rows inserted (0 when the table already had data)
    """
    existing = await session.scalar(select(func.count()).select_from(Product))
    if existing:
        logger.info("Skipping demo seed, table not empty", existing=existing)
        return 0

    session.add_all(
        Product(name=name, type=type_, status=status)
        for name, type_, status in DEMO_PRODUCTS
    )
    await session.commit()

    logger.info("Demo products seeded", count=len(DEMO_PRODUCTS))
    return len(DEMO_PRODUCTS)
