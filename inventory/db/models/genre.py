"""
Genre model and the item <-> genre association table (no attributes of its own).
"""

from sqlalchemy import Column, ForeignKey, String, Table
from sqlalchemy.orm import Mapped, mapped_column

from inventory.db.base import Base

item_genres = Table(
    "item_genres",
    Base.metadata,
    Column("item_id", ForeignKey("items.id"), primary_key=True),
    Column("genre_id", ForeignKey("genres.id"), primary_key=True, index=True),
)


class Genre(Base):
    __tablename__ = "genres"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    genre_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Genre(id={self.id}, genre_name={self.genre_name})>"
