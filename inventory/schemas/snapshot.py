"""
Snapshot schemas - read-only, in-memory view of the backing data.
One Snapshot is the whole input of a single listing run.
"""

from pydantic import BaseModel, Field


class CategoryRecord(BaseModel):
    id: int
    category_name: str

    model_config = {"from_attributes": True, "frozen": True}


class ItemRecord(BaseModel):
    id: int
    item_name: str
    is_on_sale: bool = False
    category_id: int

    model_config = {"from_attributes": True, "frozen": True}


class ContributorRecord(BaseModel):
    id: int
    contributor_name: str

    model_config = {"from_attributes": True, "frozen": True}


class ItemContributorRecord(BaseModel):
    """Item -> contributor link. A missing contributor_id means the link is skipped."""

    item_id: int
    contributor_id: int | None = None

    model_config = {"from_attributes": True, "frozen": True}


class GenreRecord(BaseModel):
    id: int
    genre_name: str

    model_config = {"from_attributes": True, "frozen": True}


class GenreLinkRecord(BaseModel):
    """Row of the item <-> genre association table."""

    item_id: int
    genre_id: int

    model_config = {"from_attributes": True, "frozen": True}


class Snapshot(BaseModel):
    items: list[ItemRecord] = Field(default_factory=list)
    categories: list[CategoryRecord] = Field(default_factory=list)
    item_contributors: list[ItemContributorRecord] = Field(default_factory=list)
    contributors: list[ContributorRecord] = Field(default_factory=list)
    genre_links: list[GenreLinkRecord] = Field(default_factory=list)
    genres: list[GenreRecord] = Field(default_factory=list)
