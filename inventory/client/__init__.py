"""Client consumers of the inventory API."""

from inventory.client.product_service import ProductServiceClient
from inventory.client.views import DashboardView, ProductListView

__all__ = ["ProductServiceClient", "DashboardView", "ProductListView"]
