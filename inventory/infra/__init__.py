"""Infrastructure - Database, logging, seed data."""

from inventory.infra.database import (
    close_db_engine,
    get_db_session,
    init_db,
    verify_db_connection,
)
from inventory.infra.logging import get_logger, setup_logging
from inventory.infra.seed import seed_demo_products

__all__ = [
    "get_db_session",
    "init_db",
    "close_db_engine",
    "verify_db_connection",
    "setup_logging",
    "get_logger",
    "seed_demo_products",
]
