"""
Base repository - generic per-table reads over one model.
Used by the CLI to report table sizes after seeding.
"""

from typing import Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic async repository bound to one model."""

    def __init__(self, session: AsyncSession, model: type[ModelType]):
        self.session = session
        self.model = model

    async def count(self) -> int:
        """Row count for the model's table."""
        result = await self.session.execute(select(func.count()).select_from(self.model))
        return result.scalar_one()
