"""Test configuration for database unit tests.

This module provides common fixtures for testing the database layer against
an in-memory SQLite database.
"""

from __future__ import annotations

from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlmodel.pool import StaticPool

from tempo_gig_manager.core.database import create_all, create_engine, create_sessionmaker
from tempo_gig_manager.core.database.entities import Band, Gig, User, Venue


@pytest.fixture(scope="function")
async def in_memory_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create in-memory SQLite engine with every table created."""
    engine = create_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture(scope="function")
async def in_memory_session(in_memory_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create in-memory SQLite session for testing."""
    async with create_sessionmaker(in_memory_engine)() as session:
        yield session


@pytest.fixture
async def user(in_memory_session: AsyncSession) -> User:
    entity = User(email="owner@bluenote.test", role="venue")
    in_memory_session.add(entity)
    await in_memory_session.commit()
    return entity


@pytest.fixture
async def venue(in_memory_session: AsyncSession, user: User) -> Venue:
    entity = Venue(name="Blue Note", type="bar", esrb_rating="21+", typical_genres=["jazz"], user_id=user.id)
    in_memory_session.add(entity)
    await in_memory_session.commit()
    return entity


@pytest.fixture
async def band(in_memory_session: AsyncSession, user: User) -> Band:
    entity = Band(
        name="The Loud Band",
        phone="555-0100",
        email="band@loud.test",
        genre="rock",
        profile_picture="https://img.test/band.png",
        user_id=user.id,
    )
    in_memory_session.add(entity)
    await in_memory_session.commit()
    return entity


@pytest.fixture
async def gig(in_memory_session: AsyncSession, venue: Venue) -> Gig:
    entity = Gig(
        title="Friday Jazz Night",
        venue_id=venue.id,
        venue=venue.name,
        location="Austin, TX",
        date="2026-11-06",
        time="8:00 PM",
        price="$250",
        genre=["jazz"],
        status="published",
    )
    in_memory_session.add(entity)
    await in_memory_session.commit()
    return entity
