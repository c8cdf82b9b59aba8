"""
FastAPI dependencies - injection for DB-backed services (SOLID: Dependency Inversion).
"""

from typing import Annotated

from fastapi import Depends

from inventory.db.repositories.listing_repository import ListingRepository
from inventory.db.repositories.snapshot_repository import SnapshotRepository
from inventory.db.session import DbSession
from inventory.services.listing_service import ListingService


def get_listing_service(session: DbSession) -> ListingService:
    """Factory for service with repository injection."""
    return ListingService(ListingRepository(session), SnapshotRepository(session))


ListingServiceDep = Annotated[ListingService, Depends(get_listing_service)]
