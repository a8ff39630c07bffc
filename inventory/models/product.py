"""Product model - the single inventory entity."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from inventory.models.base import Base


class Product(Base):
    """Product tracked by the inventory.

    Maps to the `Products` table. ``type`` is conventionally "Handmade" or
    "Machine-made" and ``status`` "Available" or "Defective"; both are stored
    as free text.
    """

    __tablename__ = "Products"

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("Name", String(100), nullable=False)
    type: Mapped[str] = mapped_column("Type", String(50), nullable=False)
    status: Mapped[str] = mapped_column("Status", String(50), nullable=False)

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name='{self.name}', status='{self.status}')>"
