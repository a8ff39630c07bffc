"""Pydantic schemas for request/response validation."""

from inventory.schemas.common import ErrorResponse, HealthResponse
from inventory.schemas.product import (
    ProductBase,
    ProductCreate,
    ProductRead,
    ProductStats,
    ProductUpdate,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "ProductBase",
    "ProductCreate",
    "ProductRead",
    "ProductStats",
    "ProductUpdate",
]
