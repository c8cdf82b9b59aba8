"""
Contributor model and the item -> contributor link row.
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventory.db.base import Base

if TYPE_CHECKING:
    from inventory.db.models.item import Item


class Contributor(Base):
    __tablename__ = "contributors"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    contributor_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Contributor(id={self.id}, contributor_name={self.contributor_name})>"


class ItemContributor(Base):
    """Explicit join row. contributor_id is nullable; such links are ignored by listings."""

    __tablename__ = "item_contributors"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    item_id: Mapped[int] = mapped_column(ForeignKey("items.id"), nullable=False, index=True)
    contributor_id: Mapped[int | None] = mapped_column(
        ForeignKey("contributors.id"), nullable=True, index=True
    )

    item: Mapped["Item"] = relationship("Item", back_populates="item_contributors")
    contributor: Mapped[Contributor | None] = relationship(Contributor)

    def __repr__(self) -> str:
        return f"<ItemContributor(item_id={self.item_id}, contributor_id={self.contributor_id})>"
