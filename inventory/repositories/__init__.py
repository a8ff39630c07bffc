"""Persistence gateway and its SQLAlchemy implementation."""

from inventory.repositories.base import ProductGateway
from inventory.repositories.product_repository import ProductRepository

__all__ = ["ProductGateway", "ProductRepository"]
