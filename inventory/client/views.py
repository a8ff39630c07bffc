"""Text views over the inventory API: stats dashboard and product list.

Each view keeps the last response as its state and renders it as plain text.
"""

from dataclasses import dataclass, field

from inventory.client.product_service import ProductServiceClient
from inventory.schemas.product import ProductRead, ProductStats


@dataclass
class DashboardView:
    """Stock status counts. Zero until the first ``load()`` returns."""

    stats: ProductStats = field(default_factory=ProductStats)

    async def load(self, client: ProductServiceClient) -> ProductStats:
        self.stats = await client.get_stats()
        return self.stats

    def render(self) -> str:
        return "\n".join(
            [
                f"Total:     {self.stats.Total}",
                f"Defective: {self.stats.Defective}",
                f"Available: {self.stats.Available}",
            ]
        )


@dataclass
class ProductListView:
    """Product table. Empty until the first ``load()`` returns."""

    products: list[ProductRead] = field(default_factory=list)

    async def load(self, client: ProductServiceClient) -> list[ProductRead]:
        self.products = await client.get_products()
        return self.products

    def render(self) -> str:
        if not self.products:
            return "No products."

        headers = ("Id", "Name", "Type", "Status")
        rows = [(str(p.id), p.name, p.type, p.status) for p in self.products]
        widths = [max(len(row[i]) for row in [headers, *rows]) for i in range(len(headers))]

        def fmt(row: tuple[str, ...]) -> str:
            return "  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip()

        lines = [fmt(headers), "  ".join("-" * w for w in widths)]
        lines.extend(fmt(row) for row in rows)
        return "\n".join(lines)
