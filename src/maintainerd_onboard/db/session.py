"""
maintainerd_onboard.db.session

Async SQLAlchemy engine + session factory helpers.

Responsibilities:
- Create the async engine from settings.
- Give SQLite real transactions so SAVEPOINTs nest inside the session's transaction.
- Create the async sessionmaker with safe defaults.
"""

from __future__ import annotations

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from maintainerd_onboard.settings import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    engine = create_async_engine(
        settings.database_url,
        pool_pre_ping=True,
    )
    if make_url(settings.database_url).get_backend_name() == "sqlite":
        _enable_sqlite_transactions(engine)
    return engine


def _enable_sqlite_transactions(engine: AsyncEngine) -> None:
    # The sqlite3 driver defers BEGIN until the first DML statement, so a SAVEPOINT
    # issued after plain SELECTs would open (and RELEASE would commit) the outer
    # transaction. Turn off the driver's handling and emit BEGIN ourselves.
    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn) -> None:
        conn.exec_driver_sql("BEGIN")


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False avoids surprising lazy loads after commits.
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
    )


# --- Module Notes -----------------------------------------------------------
# The SQLite hooks follow SQLAlchemy's documented pysqlite/aiosqlite recipe; other
# backends open transactions correctly on their own.
