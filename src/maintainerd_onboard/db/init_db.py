"""
maintainerd_onboard.db.init_db

DB initialization helpers (dev/test convenience).

Responsibilities:
- Create tables for local development and tests.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from maintainerd_onboard.db import models  # noqa: F401  # register models on Base.metadata
from maintainerd_onboard.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    """
    Dev/test bootstrap: create tables if they don't exist.
    Production databases are owned and migrated by maintainerd itself.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
