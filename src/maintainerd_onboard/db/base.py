"""
maintainerd_onboard.db.base

SQLAlchemy declarative base.

Responsibilities:
- Provide a shared DeclarativeBase for the maintainerd tables.
"""

from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


# --- Module Notes -----------------------------------------------------------
# `db.init_db` imports `db.models` before `create_all` so every table is registered here.
