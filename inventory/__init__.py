"""Inventory API - product CRUD and stock status aggregates."""

__version__ = "0.1.0"
