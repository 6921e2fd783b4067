"""Engine, session factory and schema helpers."""

import logging
from typing import Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

# Import models to register with AccountBase.metadata
import agronom_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from agronom_config import get_settings
from agronom_identity.infrastructure.persistence.sqlalchemy.base import AccountBase

logger = logging.getLogger(__name__)


def _serialize_sqlite_writers(engine: AsyncEngine) -> None:
    """Start every SQLite transaction with BEGIN IMMEDIATE.

    A second writer then waits (busy timeout) for the first to commit and
    hits the unique constraint, instead of failing with "database is locked"
    when it tries to upgrade a read lock.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _disable_driver_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_engine(database_url: Optional[str] = None, echo: bool = False) -> AsyncEngine:
    """Create an async engine for the configured (or given) database URL."""
    url = database_url or get_settings().database_url
    engine = create_async_engine(
        url,
        echo=echo,
        pool_pre_ping=True,
        # Bound values include credential hashes; keep them out of error text
        hide_parameters=True,
    )
    if engine.dialect.name == "sqlite":
        _serialize_sqlite_writers(engine)
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all account tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring account tables exist...")
    async with engine.begin() as conn:
        await conn.run_sync(AccountBase.metadata.create_all)
    logger.info("Database schema is up to date")


async def drop_tables(engine: AsyncEngine) -> None:
    """
    Drop all account tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    logger.warning("Dropping all account tables...")
    async with engine.begin() as conn:
        await conn.run_sync(AccountBase.metadata.drop_all)
    logger.info("Account tables dropped")
