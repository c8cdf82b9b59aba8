from inventory.schemas.listing import ListingRow, ListingStrategy, csv_tokens
from inventory.schemas.snapshot import (
    CategoryRecord,
    ContributorRecord,
    GenreLinkRecord,
    GenreRecord,
    ItemContributorRecord,
    ItemRecord,
    Snapshot,
)

__all__ = [
    "ListingRow",
    "ListingStrategy",
    "csv_tokens",
    "CategoryRecord",
    "ContributorRecord",
    "GenreLinkRecord",
    "GenreRecord",
    "ItemContributorRecord",
    "ItemRecord",
    "Snapshot",
]
