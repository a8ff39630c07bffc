"""Tests for base model infrastructure."""

from sqlalchemy.orm import DeclarativeBase

from inventory.models import Base, Product


def test_base_is_declarative_base():
    """Base should be a SQLAlchemy DeclarativeBase."""
    assert hasattr(Base, "metadata")
    assert issubclass(Base, DeclarativeBase)


def test_product_registered_on_metadata():
    """Importing the models package registers every table."""
    assert Product.__table__ is Base.metadata.tables["Products"]
