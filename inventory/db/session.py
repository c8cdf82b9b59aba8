"""
Async database session management.
Challenge: Connection pooling, scoped sessions, proper cleanup.
Design: Dependency injection for request-scoped, read-only sessions.
"""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from inventory.config import get_settings
from inventory.db.base import Base

settings = get_settings()


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine. SQLite gets no pool sizing (not supported by its pool)."""
    if url.startswith("sqlite"):
        return create_async_engine(url, echo=echo)
    return create_async_engine(
        url,
        echo=echo,
        pool_pre_ping=True,  # Verify connections before use
        pool_size=10,
        max_overflow=20,
    )


engine = build_engine(settings.database_url, echo=settings.debug)

# Session factory: one session per request / CLI invocation
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session per request. Listings only read, so nothing is committed."""
    async with async_session_maker() as session:
        yield session


async def create_all(bind: AsyncEngine = engine) -> None:
    """Create every table known to Base.metadata (development scaffolding)."""
    import inventory.db.models  # noqa: F401 - ensure models are registered

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# Type alias for FastAPI dependency injection
DbSession = Annotated[AsyncSession, Depends(get_db)]
