"""
Listing endpoint - read-only, one strategy per request.
Design: Thin controller; the service picks the query shape and engine.
Data errors are turned into envelopes by the handlers in inventory.api.errors.
"""

from typing import Literal

from fastapi import APIRouter, Query

from inventory.config import get_settings
from inventory.core.dependencies import ListingServiceDep
from inventory.schemas.listing import ListingRow, ListingStrategy

router = APIRouter()
settings = get_settings()


@router.get("", response_model=list[ListingRow])
async def list_listings(
    service: ListingServiceDep,
    strategy: ListingStrategy = Query(settings.listing_strategy),
    engine: Literal["database", "memory"] = Query(settings.listing_engine),
):
    """Flattened item listing. GET /listings?strategy=pre-aggregated-join&engine=database."""
    return await service.get_listing(strategy, engine)
