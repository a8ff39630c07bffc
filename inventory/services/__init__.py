"""Domain services."""

from inventory.services.product_stats import compute_stats

__all__ = ["compute_stats"]
