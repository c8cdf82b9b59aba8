"""
Listing service - runs one listing strategy on one engine (SOLID: Single Responsibility).
Challenge: Keep entry points thin; time and log every run so strategies can be compared.
Design: Depends on repositories only; "database" pushes the strategy down as SQL,
"memory" loads a snapshot and aggregates in Python.
"""

import time
from typing import Literal

import structlog
from prometheus_client import Histogram

from inventory.db.repositories.listing_repository import ListingRepository
from inventory.db.repositories.snapshot_repository import SnapshotRepository
from inventory.schemas.listing import ListingRow, ListingStrategy
from inventory.services.aggregator import produce_listing

logger = structlog.get_logger()

Engine = Literal["database", "memory"]

LISTING_SECONDS = Histogram(
    "inventory_listing_seconds",
    "Time to produce a full listing",
    ["strategy", "engine"],
)


class ListingService:
    """Produces listings. Errors are logged and re-raised unchanged (no partial output)."""

    def __init__(self, listing_repo: ListingRepository, snapshot_repo: SnapshotRepository):
        self.listing_repo = listing_repo
        self.snapshot_repo = snapshot_repo

    async def _produce(self, strategy: ListingStrategy, engine: Engine) -> list[ListingRow]:
        if engine == "database":
            return await self.listing_repo.fetch(strategy)
        if engine == "memory":
            snapshot = await self.snapshot_repo.load()
            return produce_listing(snapshot, strategy)
        raise ValueError(f"unknown listing engine: {engine!r}")

    async def get_listing(self, strategy: ListingStrategy, engine: Engine = "database") -> list[ListingRow]:
        strategy = ListingStrategy(strategy)
        log = logger.bind(strategy=strategy.value, engine=engine)
        started = time.perf_counter()
        try:
            rows = await self._produce(strategy, engine)
        except Exception as exc:
            log.error("listing.failed", error=str(exc), error_type=type(exc).__name__)
            raise
        elapsed = time.perf_counter() - started
        LISTING_SECONDS.labels(strategy=strategy.value, engine=engine).observe(elapsed)
        log.info("listing.produced", rows=len(rows), elapsed_ms=round(elapsed * 1000, 2))
        return rows

    async def compare(self, engine: Engine = "database") -> dict[ListingStrategy, tuple[list[ListingRow], float]]:
        """Run every strategy once on the same engine. Returns rows and seconds per strategy."""
        results = {}
        for strategy in ListingStrategy:
            started = time.perf_counter()
            rows = await self.get_listing(strategy, engine)
            results[strategy] = (rows, time.perf_counter() - started)
        return results
