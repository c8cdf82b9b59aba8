"""
CLI for inventory listings.
Sequence per command: acquire session -> run listing -> present -> report count.
"""

import asyncio
from contextlib import asynccontextmanager
from enum import Enum
from typing import Annotated, Optional

import structlog
import typer
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from inventory.config import get_settings
from inventory.core.errors import MissingReferenceError
from inventory.core.logging import configure_logging
from inventory.db.models import Contributor, Genre, Item
from inventory.db.repositories import BaseRepository, ListingRepository, SnapshotRepository
from inventory.db.session import build_engine, create_all
from inventory.presentation.console import console, print_listing
from inventory.schemas.listing import ListingStrategy
from inventory.services.compare import diff_listings
from inventory.services.listing_service import ListingService
from inventory.services.synthetic import generate_snapshot

app = typer.Typer(
    name="inventory",
    help="Inventory listings - compare correlated vs pre-aggregated query strategies",
    no_args_is_help=True,
)

logger = structlog.get_logger()


class EngineChoice(str, Enum):
    database = "database"
    memory = "memory"


@asynccontextmanager
async def _session_scope():
    """One engine and one session per command; the pool is disposed on exit."""
    settings = get_settings()
    engine = build_engine(settings.database_url, echo=settings.debug)
    maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    try:
        async with maker() as session:
            yield session
    finally:
        await engine.dispose()


def _service(session: AsyncSession) -> ListingService:
    return ListingService(ListingRepository(session), SnapshotRepository(session))


def _fail(command: str, exc: Exception) -> None:
    logger.error(f"{command}.failed", error=str(exc), error_type=type(exc).__name__)
    console.print(f"[red]Error:[/red] {exc}", markup=True, highlight=False)
    raise typer.Exit(1)


@app.callback()
def main() -> None:
    """Configure logging before any command runs."""
    settings = get_settings()
    configure_logging(settings.log_level, json=settings.log_json)


@app.command("init-db")
def init_db() -> None:
    """Create all tables (development scaffolding, not migrations)."""
    settings = get_settings()

    async def _run():
        engine = build_engine(settings.database_url, echo=settings.debug)
        try:
            await create_all(engine)
        finally:
            await engine.dispose()

    try:
        asyncio.run(_run())
    except SQLAlchemyError as exc:
        _fail("init_db", exc)
    console.print("Database initialized.")


@app.command("seed")
def seed(
    items: Annotated[int, typer.Option(help="Number of items")] = 100,
    contributors: Annotated[int, typer.Option(help="Number of contributors")] = 30,
    genres: Annotated[int, typer.Option(help="Number of genres")] = 12,
    max_fan_out: Annotated[int, typer.Option(help="Max links per item and relation")] = 4,
    seed: Annotated[Optional[int], typer.Option("--seed", help="Random seed")] = None,
) -> None:
    """Store a synthetic snapshot (duplicate links and empty links included)."""
    snapshot = generate_snapshot(
        items=items,
        contributors=contributors,
        genres=genres,
        max_fan_out=max_fan_out,
        seed=seed,
    )

    async def _run():
        async with _session_scope() as session:
            async with session.begin():
                await SnapshotRepository(session).store(snapshot)
            return {
                "items": await BaseRepository(session, Item).count(),
                "contributors": await BaseRepository(session, Contributor).count(),
                "genres": await BaseRepository(session, Genre).count(),
            }

    try:
        counts = asyncio.run(_run())
    except SQLAlchemyError as exc:
        _fail("seed", exc)
    logger.info("seed.done", **counts)
    console.print(
        f"Seeded. Items: {counts['items']}, contributors: {counts['contributors']}, genres: {counts['genres']}"
    )


@app.command("show")
def show(
    strategy: Annotated[
        Optional[ListingStrategy], typer.Option("--strategy", "-s", help="Query strategy")
    ] = None,
    engine: Annotated[
        Optional[EngineChoice], typer.Option("--engine", "-e", help="Run as SQL or in memory")
    ] = None,
) -> None:
    """Show the item listing using exactly one strategy."""
    settings = get_settings()
    strategy = strategy or settings.listing_strategy
    engine_name = engine.value if engine else settings.listing_engine

    console.print("Showing Data...")

    async def _run():
        async with _session_scope() as session:
            return await _service(session).get_listing(strategy, engine_name)

    try:
        rows = asyncio.run(_run())
    except (MissingReferenceError, SQLAlchemyError) as exc:
        _fail("show", exc)
    print_listing(rows, title=ListingStrategy(strategy).value)


@app.command("compare")
def compare(
    engine: Annotated[
        Optional[EngineChoice], typer.Option("--engine", "-e", help="Run as SQL or in memory")
    ] = None,
) -> None:
    """Run both strategies, print timings, and verify they agree."""
    settings = get_settings()
    engine_name = engine.value if engine else settings.listing_engine

    async def _run():
        async with _session_scope() as session:
            return await _service(session).compare(engine_name)

    try:
        results = asyncio.run(_run())
    except (MissingReferenceError, SQLAlchemyError) as exc:
        _fail("compare", exc)

    table = Table(title=f"Listing strategies ({engine_name})")
    table.add_column("Strategy")
    table.add_column("Rows", justify="right")
    table.add_column("Elapsed (ms)", justify="right")
    for strategy, (rows, seconds) in results.items():
        table.add_row(strategy.value, str(len(rows)), f"{seconds * 1000:.2f}")
    console.print(table)

    correlated, _ = results[ListingStrategy.PER_ITEM_CORRELATED]
    pre_aggregated, _ = results[ListingStrategy.PRE_AGGREGATED_JOIN]
    problems = diff_listings(correlated, pre_aggregated)
    if problems:
        for problem in problems:
            console.print(problem, markup=False)
        console.print("[red]Strategies disagree.[/red]")
        raise typer.Exit(1)
    console.print("Strategies agree.")


if __name__ == "__main__":
    app()
