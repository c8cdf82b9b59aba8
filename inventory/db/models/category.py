"""
Category model - every item belongs to exactly one.
"""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventory.db.base import Base

if TYPE_CHECKING:
    from inventory.db.models.item import Item


class Category(Base):
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    category_name: Mapped[str] = mapped_column(String(255), nullable=False)

    items: Mapped[list["Item"]] = relationship("Item", back_populates="category")

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, category_name={self.category_name})>"
