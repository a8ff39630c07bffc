"""Tests for stock status aggregation."""

from inventory.models.product import Product
from inventory.services.product_stats import compute_stats


def products_with(*statuses: str) -> list[Product]:
    return [
        Product(id=i, name=f"P{i}", type="Handmade", status=status)
        for i, status in enumerate(statuses, start=1)
    ]


def test_empty():
    stats = compute_stats([])
    assert (stats.Total, stats.Defective, stats.Available) == (0, 0, 0)


def test_unknown_status_only_in_total():
    stats = compute_stats(products_with("Available", "Defective", "Available", "Unknown"))
    assert stats.model_dump() == {"Total": 4, "Defective": 1, "Available": 2}


def test_exact_case_sensitive_match():
    stats = compute_stats(products_with("available", "defective", " Available", "Defective"))
    assert stats.model_dump() == {"Total": 4, "Defective": 1, "Available": 0}


def test_accepts_any_iterable():
    stats = compute_stats(p for p in products_with("Defective", "Defective"))
    assert stats.Total == 2
    assert stats.Defective == 2
