"""
Centralized database layer for Tempo Gig Manager.

This package provides a unified location for all database entities and repositories,
organized by table.

Structure:
- entities/: SQLModel table models, one module per table or close group of tables
- repositories/: Data access layer, one repository per table
- session.py: Global engine and session factory management
- utils.py: Database utility functions (engine, session factory, create_all)
"""

from .base import Base, UTCDateTime, utc_now
from .session import (
    async_session_maker,
    engine,
    get_session,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
)

__all__ = [
    "Base",
    "UTCDateTime",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "engine",
    "get_session",
    "init_db",
    "utc_now",
]
