"""Unit tests for the calendar availability repository."""

from __future__ import annotations

import datetime as dt

import pytest

from tempo_gig_manager.core.database.repositories import CalendarRepository


@pytest.fixture
def repository(in_memory_session):
    return CalendarRepository(in_memory_session)


class TestCalendarRepository:
    @pytest.mark.asyncio
    async def test_upsert_creates_then_updates(self, repository, user):
        day = dt.date(2026, 11, 6)

        created = await repository.upsert(user.id, day, False)
        updated = await repository.upsert(user.id, day, True)

        assert updated.id == created.id
        assert updated.is_available is True
        assert await repository.count() == 1

    @pytest.mark.asyncio
    async def test_list_range_inclusive_and_sorted(self, repository, user):
        for day in (dt.date(2026, 11, 10), dt.date(2026, 11, 1), dt.date(2026, 11, 5), dt.date(2026, 12, 1)):
            await repository.upsert(user.id, day, True)

        entries = await repository.list_range(user.id, dt.date(2026, 11, 1), dt.date(2026, 11, 10))

        assert [e.date for e in entries] == [dt.date(2026, 11, 1), dt.date(2026, 11, 5), dt.date(2026, 11, 10)]

    @pytest.mark.asyncio
    async def test_delete_for_date(self, repository, user):
        day = dt.date(2026, 11, 6)
        await repository.upsert(user.id, day, True)

        assert await repository.delete_for_date(user.id, day) is True
        assert await repository.get_for_date(user.id, day) is None
        assert await repository.delete_for_date(user.id, day) is False
