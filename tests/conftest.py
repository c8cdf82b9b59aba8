"""
Pytest fixtures - in-memory database, API client, canned snapshots.
Challenge: Isolated tests; each test gets a fresh SQLite database.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from inventory.db.base import Base
from inventory.db import models  # noqa: F401 - ensure models are registered
from inventory.db.repositories import SnapshotRepository
from inventory.db.session import get_db
from inventory.main import app
from inventory.schemas.snapshot import (
    CategoryRecord,
    ContributorRecord,
    GenreLinkRecord,
    GenreRecord,
    ItemContributorRecord,
    ItemRecord,
    Snapshot,
)

# One shared in-memory connection per engine, so every session sees the same tables
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with async_session() as s:
        yield s


@pytest_asyncio.fixture
async def client(session: AsyncSession):
    async def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def store_snapshot(session: AsyncSession):
    """Persist a snapshot through the repository and commit it."""

    async def _store(snapshot: Snapshot) -> None:
        await SnapshotRepository(session).store(snapshot)
        await session.commit()

    return _store


@pytest.fixture
def widget_snapshot() -> Snapshot:
    """One item, a duplicated contributor link, one genre."""
    return Snapshot(
        items=[ItemRecord(id=1, item_name="Widget", category_id=10, is_on_sale=True)],
        categories=[CategoryRecord(id=10, category_name="Gadgets")],
        item_contributors=[
            ItemContributorRecord(item_id=1, contributor_id=100),
            ItemContributorRecord(item_id=1, contributor_id=100),
        ],
        contributors=[ContributorRecord(id=100, contributor_name="Alice")],
        genre_links=[GenreLinkRecord(item_id=1, genre_id=200)],
        genres=[GenreRecord(id=200, genre_name="Action")],
    )


@pytest.fixture
def mixed_snapshot() -> Snapshot:
    """
    Item 1: two contributors named Alice (different ids), Bob, a link with no contributor,
            two genres named Drama (different ids) and Action.
    Item 2: only a link with no contributor, no genres.
    Item 3: nothing linked at all.
    """
    return Snapshot(
        items=[
            ItemRecord(id=1, item_name="Space Saga", category_id=1, is_on_sale=False),
            ItemRecord(id=2, item_name="Paper Moon", category_id=2, is_on_sale=True),
            ItemRecord(id=3, item_name="Iron Garden", category_id=1, is_on_sale=False),
        ],
        categories=[
            CategoryRecord(id=1, category_name="Books"),
            CategoryRecord(id=2, category_name="Movies"),
        ],
        item_contributors=[
            ItemContributorRecord(item_id=1, contributor_id=1),
            ItemContributorRecord(item_id=1, contributor_id=2),
            ItemContributorRecord(item_id=1, contributor_id=3),
            ItemContributorRecord(item_id=1, contributor_id=None),
            ItemContributorRecord(item_id=2, contributor_id=None),
        ],
        contributors=[
            ContributorRecord(id=1, contributor_name="Alice"),
            ContributorRecord(id=2, contributor_name="Alice"),
            ContributorRecord(id=3, contributor_name="Bob"),
        ],
        genre_links=[
            GenreLinkRecord(item_id=1, genre_id=1),
            GenreLinkRecord(item_id=1, genre_id=2),
            GenreLinkRecord(item_id=1, genre_id=3),
        ],
        genres=[
            GenreRecord(id=1, genre_name="Drama"),
            GenreRecord(id=2, genre_name="Drama"),
            GenreRecord(id=3, genre_name="Action"),
        ],
    )
