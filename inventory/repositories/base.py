"""Abstract persistence gateway for products."""

from __future__ import annotations

from abc import ABC, abstractmethod

from inventory.models.product import Product


class ProductGateway(ABC):
    """Data access contract the API layer depends on.

    Any store that can satisfy these five operations can back the API.
    """

    @abstractmethod
    async def list_all(self) -> list[Product]:
        """Return every stored product, in the store's default order."""

    @abstractmethod
    async def get(self, product_id: int) -> Product | None:
        """Return the product with this id, or None."""

    @abstractmethod
    async def add(self, product: Product) -> Product:
        """Persist a new product; the store assigns its id."""

    @abstractmethod
    async def update(self, product: Product) -> Product | None:
        """Overwrite name, type and status of an existing product.

        Returns None when no product has ``product.id``.
        """

    @abstractmethod
    async def delete(self, product_id: int) -> None:
        """Remove the product if present. Missing ids are ignored."""
