from typing import Any, AsyncGenerator, Dict

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlmodel.pool import StaticPool

from tempo_gig_manager.core.database import create_all, create_engine, create_sessionmaker, get_session

# Use in-memory SQLite for testing
# Note: We use check_same_thread=False for SQLite with async
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory database with every table for each test."""
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(test_engine) -> async_sessionmaker[AsyncSession]:
    return create_sessionmaker(test_engine)


@pytest_asyncio.fixture(name="session")
async def session_fixture(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """Create a session for seeding and inspecting the test database."""
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture(name="client")
async def client_fixture(session_maker) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client whose requests each get their own test database session."""
    from tempo_gig_manager.server.main import app

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()


async def _create(client: AsyncClient, path: str, payload: Dict[str, Any], key: str) -> Dict[str, Any]:
    response = await client.post(path, json=payload)
    assert response.status_code == 201, response.text
    return response.json()[key]


@pytest_asyncio.fixture
async def venue_user(client: AsyncClient) -> Dict[str, Any]:
    return await _create(
        client, "/api/v1/users", {"email": "owner@bluenote.test", "password": "s3cret!", "role": "venue"}, "user"
    )


@pytest_asyncio.fixture
async def band_user(client: AsyncClient) -> Dict[str, Any]:
    return await _create(
        client, "/api/v1/users", {"email": "leader@loudband.test", "password": "s3cret!", "role": "band"}, "user"
    )


@pytest_asyncio.fixture
async def venue(client: AsyncClient, venue_user: Dict[str, Any]) -> Dict[str, Any]:
    payload = {
        "name": "Blue Note",
        "type": "bar",
        "esrb_rating": "21+",
        "user_id": venue_user["id"],
        "typical_genres": ["jazz", "blues"],
        "stage_details": {"size": "medium", "power": "2x 20A"},
    }
    return await _create(client, "/api/v1/venues", payload, "venue")


@pytest_asyncio.fixture
async def band(client: AsyncClient, band_user: Dict[str, Any]) -> Dict[str, Any]:
    payload = {
        "name": "The Loud Band",
        "phone": "555-0100",
        "email": "booking@loudband.test",
        "genre": "rock",
        "profile_picture": "https://img.test/loud.png",
        "user_id": band_user["id"],
    }
    return await _create(client, "/api/v1/bands", payload, "band")


@pytest_asyncio.fixture
async def gig(client: AsyncClient, venue: Dict[str, Any]) -> Dict[str, Any]:
    payload = {
        "title": "Friday Jazz Night",
        "venueId": venue["id"],
        "venue": venue["name"],
        "location": "Austin, TX",
        "date": "2026-11-06",
        "time": "8:00 PM",
        "price": "$250",
        "genre": ["jazz"],
        "status": "published",
    }
    return await _create(client, "/api/v1/gigs", payload, "gig")
