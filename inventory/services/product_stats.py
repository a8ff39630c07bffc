"""Stock status aggregation."""

from collections.abc import Iterable

from inventory.models.product import Product
from inventory.schemas.product import ProductStats

STATUS_DEFECTIVE = "Defective"
STATUS_AVAILABLE = "Available"


def compute_stats(products: Iterable[Product]) -> ProductStats:
    """Count products by status.

    Matching is exact and case-sensitive. Products with any other status
    only count toward ``Total``.
    """
    total = defective = available = 0
    for product in products:
        total += 1
        if product.status == STATUS_DEFECTIVE:
            defective += 1
        elif product.status == STATUS_AVAILABLE:
            available += 1

    return ProductStats(Total=total, Defective=defective, Available=available)
