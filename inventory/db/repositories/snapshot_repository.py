"""
Snapshot repository - moves whole snapshots between the store and memory.
load() feeds the in-memory aggregator; store() is used by seeding and tests.
"""

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory.db.models import Category, Contributor, Genre, Item, ItemContributor, item_genres
from inventory.schemas.snapshot import (
    CategoryRecord,
    ContributorRecord,
    GenreLinkRecord,
    GenreRecord,
    ItemContributorRecord,
    ItemRecord,
    Snapshot,
)


def snapshot_execution_options(dialect_name: str) -> dict:
    """Connection options for a load(): its six selects must see one point in time."""
    # SQLite serializes each transaction already
    if dialect_name == "sqlite":
        return {}
    return {"isolation_level": "REPEATABLE READ"}


class SnapshotRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def _scalars(self, model) -> list:
        result = await self.session.execute(select(model).order_by(model.id))
        return list(result.scalars().all())

    async def load(self) -> Snapshot:
        """Read all six collections inside one transaction.

        If no transaction is open yet, one is started with snapshot-level isolation so that
        a concurrent writer cannot leave links pointing at rows this load never saw.
        An already open transaction is used as it is.
        """
        if not self.session.in_transaction():
            options = snapshot_execution_options(self.session.get_bind().dialect.name)
            if options:
                await self.session.connection(execution_options=options)
        genre_links = await self.session.execute(
            select(item_genres.c.item_id, item_genres.c.genre_id)
        )
        return Snapshot(
            items=[ItemRecord.model_validate(i) for i in await self._scalars(Item)],
            categories=[CategoryRecord.model_validate(c) for c in await self._scalars(Category)],
            item_contributors=[
                ItemContributorRecord.model_validate(ic) for ic in await self._scalars(ItemContributor)
            ],
            contributors=[
                ContributorRecord.model_validate(c) for c in await self._scalars(Contributor)
            ],
            genre_links=[GenreLinkRecord.model_validate(row) for row in genre_links.all()],
            genres=[GenreRecord.model_validate(g) for g in await self._scalars(Genre)],
        )

    async def store(self, snapshot: Snapshot) -> None:
        """Bulk-insert a snapshot, parents first. Caller commits."""
        batches = [
            (insert(Category), snapshot.categories),
            (insert(Contributor), snapshot.contributors),
            (insert(Genre), snapshot.genres),
            (insert(Item), snapshot.items),
            (insert(ItemContributor), snapshot.item_contributors),
            (insert(item_genres), snapshot.genre_links),
        ]
        for stmt, records in batches:
            if records:
                await self.session.execute(stmt, [r.model_dump() for r in records])
