"""Listing schemas - the flattened per-item projection and the strategy selector."""

from enum import Enum

from pydantic import BaseModel

CSV_SEPARATOR = ", "


class ListingStrategy(str, Enum):
    """How the one-to-many relations are flattened into CSV text."""

    # One correlated lookup per item per related collection (small sets, low fan-out)
    PER_ITEM_CORRELATED = "per-item-correlated"
    # Global dedupe + group once, then left-outer-join (large sets, high fan-out)
    PRE_AGGREGATED_JOIN = "pre-aggregated-join"


class ListingRow(BaseModel):
    id: int
    item_name: str
    category_name: str
    is_on_sale: bool
    contributors_csv: str = ""
    genres_csv: str = ""

    model_config = {"from_attributes": True}


def csv_tokens(value: str | None) -> frozenset[str]:
    """Names in a CSV field as a set. Empty or missing field -> empty set."""
    if not value:
        return frozenset()
    return frozenset(value.split(CSV_SEPARATOR))


def join_csv(names) -> str:
    """Join names with the listing separator, keeping first-seen order and dropping repeats."""
    return CSV_SEPARATOR.join(dict.fromkeys(names))
