"""
Database connection management.

Provides the async SQLAlchemy engine and session factory for the local
fallback store, plus schema creation.

Dependencies: sqlalchemy, aiosqlite
System role: Database connection lifecycle management
"""

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from gm_tracker.boundary.db.base import Base
from gm_tracker.configs.local_store import LocalStoreSettings


def get_async_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create async SQLAlchemy engine.

    In-memory SQLite URLs share one connection through StaticPool so
    every session sees the same database.

    Args:
        database_url: SQLAlchemy async URL
        echo: Echo SQL statements

    Returns:
        AsyncEngine: Configured async engine

    Usage:
        engine = get_async_engine("sqlite+aiosqlite:///./gm_tracker.db")
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
    """
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        return create_async_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(database_url, echo=echo, pool_pre_ping=True)


def get_async_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """
    Create async session factory for database operations.

    Returns async_sessionmaker bound to engine with autoflush=False for
    explicit transaction control and predictable behavior.

    Args:
        engine: Async engine to bind

    Returns:
        async_sessionmaker: Async session factory

    Usage:
        SessionFactory = get_async_session_factory(engine)
        async with SessionFactory() as session:
            session.add(obj)
            await session.commit()
    """
    return async_sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )


def engine_from_settings(settings: LocalStoreSettings) -> AsyncEngine:
    """Build the fallback store engine from its settings."""
    return get_async_engine(settings.database_url, echo=settings.echo_sql)


async def create_all_tables(engine: AsyncEngine) -> None:
    """
    Create all tables from registered ORM models.

    Idempotent: existing tables remain unchanged.

    Args:
        engine: Async engine

    Raises:
        SQLAlchemyError: If table creation fails
    """
    # Import models to register them with Base.metadata
    from gm_tracker.boundary.db.models import LocalBlobModel  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
