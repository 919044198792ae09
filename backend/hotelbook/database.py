"""Embedded database handle and schema initialization."""

import logging

from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from hotelbook.errors import SchemaInitializationError
from hotelbook.models import Base

logger = logging.getLogger(__name__)


def _on_connect(dbapi_connection, connection_record):
    # Stop the driver from issuing its own BEGIN so SAVEPOINT works,
    # and turn on foreign key enforcement (off by default in SQLite).
    dbapi_connection.isolation_level = None
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# Execution option that makes the next transaction take the write lock up front
IMMEDIATE = "sqlite_begin_immediate"


def _on_begin(conn):
    if conn.get_execution_options().get(IMMEDIATE):
        conn.exec_driver_sql("BEGIN IMMEDIATE")
    else:
        conn.exec_driver_sql("BEGIN")


class Database:
    """One engine and session factory for the lifetime of the process.

    Construct it at startup, call :meth:`initialize` once, hand sessions to
    the stores, and :meth:`dispose` on shutdown. Tests build one per test
    against a throwaway file.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, echo=echo)
        event.listen(self.engine.sync_engine, "connect", _on_connect)
        event.listen(self.engine.sync_engine, "begin", _on_begin)

        self.sessionmaker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def initialize(self) -> None:
        """Create any missing tables. Existing tables and rows are left alone."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            logger.exception("Schema initialization failed for %s", self.url)
            raise SchemaInitializationError(str(e)) from e
        logger.info("Database tables verified")

    def session(self) -> AsyncSession:
        return self.sessionmaker()

    async def dispose(self) -> None:
        await self.engine.dispose()
