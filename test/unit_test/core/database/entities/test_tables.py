"""Unit tests for the entity tables.

Tests defaults, column constraints and cascade rules against an in-memory
SQLite database.
"""

from __future__ import annotations

import datetime as dt
import uuid

import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import select

from tempo_gig_manager.core.database.entities import (
    AdminUser,
    AnalyticsEvent,
    Artist,
    BandMember,
    CalendarAvailability,
    Gig,
    GigApplicant,
    User,
    Venue,
)


class TestDefaults:
    def test_user_defaults(self):
        user = User(email="a@b.test", role="artist")
        assert isinstance(user.id, uuid.UUID)
        assert user.two_factor_enabled is False
        assert user.face_verified is False
        assert user.profile_completed is False
        assert user.created_at.tzinfo is not None

    def test_gig_defaults(self):
        gig = Gig(title="t", venue="v", location="l", date="d", time="t", price="p", genre=[])
        assert gig.status == "draft"
        assert gig.payment_type == "flat_fee"
        assert gig.esrb_rating == "family"
        assert gig.equipment_provided == []
        assert gig.venue_id is None

    def test_artist_open_to_work_by_default(self):
        artist = Artist(name="Solo", genre=["folk"], instruments=["guitar"], user_id=uuid.uuid4())
        assert artist.open_to_work is True

    def test_calendar_available_by_default(self):
        entry = CalendarAvailability(user_id=uuid.uuid4(), date=dt.date(2026, 11, 1))
        assert entry.is_available is True

    def test_repr(self):
        admin = AdminUser(username="ops", password_hash="x")
        assert "ops" in repr(admin)


class TestConstraints:
    @pytest.mark.asyncio
    async def test_user_role_checked(self, in_memory_session):
        in_memory_session.add(User(email="x@y.test", role="promoter"))
        with pytest.raises(IntegrityError):
            await in_memory_session.commit()

    @pytest.mark.asyncio
    async def test_user_email_unique(self, in_memory_session, user):
        in_memory_session.add(User(email=user.email, role="band"))
        with pytest.raises(IntegrityError):
            await in_memory_session.commit()

    @pytest.mark.asyncio
    async def test_venue_type_checked(self, in_memory_session, user):
        in_memory_session.add(Venue(name="Hall", type="stadium", esrb_rating="family", user_id=user.id))
        with pytest.raises(IntegrityError):
            await in_memory_session.commit()

    @pytest.mark.asyncio
    async def test_gig_status_checked(self, in_memory_session, venue):
        in_memory_session.add(
            Gig(title="t", venue="v", location="l", date="d", time="t", price="p", genre=[], status="cancelled")
        )
        with pytest.raises(IntegrityError):
            await in_memory_session.commit()

    @pytest.mark.asyncio
    async def test_band_applies_once(self, in_memory_session, gig, band):
        in_memory_session.add(GigApplicant(gig_id=gig.id, band_id=band.id, band_name=band.name))
        await in_memory_session.commit()

        in_memory_session.add(GigApplicant(gig_id=gig.id, band_id=band.id, band_name=band.name))
        with pytest.raises(IntegrityError):
            await in_memory_session.commit()

    @pytest.mark.asyncio
    async def test_one_calendar_entry_per_day(self, in_memory_session, user):
        day = dt.date(2026, 11, 1)
        in_memory_session.add(CalendarAvailability(user_id=user.id, date=day))
        await in_memory_session.commit()

        in_memory_session.add(CalendarAvailability(user_id=user.id, date=day, is_available=False))
        with pytest.raises(IntegrityError):
            await in_memory_session.commit()

    @pytest.mark.asyncio
    async def test_venue_owner_must_exist(self, in_memory_session):
        in_memory_session.add(Venue(name="Ghost", type="bar", esrb_rating="family", user_id=uuid.uuid4()))
        with pytest.raises(IntegrityError):
            await in_memory_session.commit()


class TestCascades:
    @pytest.mark.asyncio
    async def test_deleting_user_removes_owned_rows(self, in_memory_session, user, venue, band, gig):
        in_memory_session.add(BandMember(name="Sam", role="Drummer", instrument="drums", band_id=band.id))
        in_memory_session.add(GigApplicant(gig_id=gig.id, band_id=band.id, band_name=band.name))
        in_memory_session.add(CalendarAvailability(user_id=user.id, date=dt.date(2026, 11, 1)))
        await in_memory_session.commit()

        await in_memory_session.delete(user)
        await in_memory_session.commit()
        in_memory_session.expunge_all()

        for model in (Venue, Gig, GigApplicant, BandMember, CalendarAvailability):
            result = await in_memory_session.execute(select(model))
            assert result.scalars().all() == [], model.__name__

    @pytest.mark.asyncio
    async def test_deleting_user_keeps_analytics(self, in_memory_session, user):
        in_memory_session.add(AnalyticsEvent(event="page_view", user_id=user.id))
        await in_memory_session.commit()

        await in_memory_session.delete(user)
        await in_memory_session.commit()
        in_memory_session.expunge_all()

        events = (await in_memory_session.execute(select(AnalyticsEvent))).scalars().all()
        assert len(events) == 1
        assert events[0].user_id is None


class TestTimestamps:
    @pytest.mark.asyncio
    async def test_read_back_as_utc(self, in_memory_session, user):
        user_id = user.id
        in_memory_session.expunge_all()

        stored = (await in_memory_session.execute(select(User).where(User.id == user_id))).scalar_one()
        assert stored.created_at.tzinfo is not None
        assert stored.created_at.utcoffset() == dt.timedelta(0)

    @pytest.mark.asyncio
    async def test_offset_values_stored_as_utc(self, in_memory_session, gig, band):
        plus_two = dt.timezone(dt.timedelta(hours=2))
        applicant = GigApplicant(
            gig_id=gig.id,
            band_id=band.id,
            band_name=band.name,
            applied_at=dt.datetime(2026, 5, 1, 12, 0, tzinfo=plus_two),
        )
        in_memory_session.add(applicant)
        await in_memory_session.commit()
        applicant_id = applicant.id
        in_memory_session.expunge_all()

        stored = await in_memory_session.get(GigApplicant, applicant_id)
        assert stored.applied_at == dt.datetime(2026, 5, 1, 10, 0, tzinfo=dt.timezone.utc)
        assert stored.applied_at.tzinfo == dt.timezone.utc
