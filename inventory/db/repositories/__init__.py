# Repository pattern: abstract data access (SOLID - Dependency Inversion)

from inventory.db.repositories.base_repository import BaseRepository
from inventory.db.repositories.listing_repository import ListingRepository
from inventory.db.repositories.snapshot_repository import SnapshotRepository

__all__ = ["BaseRepository", "ListingRepository", "SnapshotRepository"]
