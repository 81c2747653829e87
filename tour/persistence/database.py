"""Async engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from tour.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine (asyncpg driver).

    Connections identify themselves as ``tour-planner-api`` in
    ``pg_stat_activity``; SQL is echoed in debug mode.
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        connect_args={"server_settings": {"application_name": "tour-planner-api"}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # One session per request; the persistence provider commits or rolls back
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
