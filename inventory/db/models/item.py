"""
Item model - the parent row of every listing.
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventory.db.base import Base
from inventory.db.models.genre import item_genres

if TYPE_CHECKING:
    from inventory.db.models.category import Category
    from inventory.db.models.contributor import ItemContributor
    from inventory.db.models.genre import Genre


class Item(Base):
    """Item entity. Many-to-one category, one-to-many contributor links, many-to-many genres."""

    __tablename__ = "items"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    item_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    is_on_sale: Mapped[bool] = mapped_column(default=False, nullable=False)
    category_id: Mapped[int] = mapped_column(ForeignKey("categories.id"), nullable=False, index=True)

    category: Mapped["Category"] = relationship("Category", back_populates="items")
    item_contributors: Mapped[list["ItemContributor"]] = relationship(
        "ItemContributor", back_populates="item"
    )
    genres: Mapped[list["Genre"]] = relationship("Genre", secondary=item_genres)

    def __repr__(self) -> str:
        return f"<Item(id={self.id}, item_name={self.item_name})>"
