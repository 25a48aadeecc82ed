"""Initial schema for Tempo Gig Manager

Revision ID: 20261017_000000
Revises: None
Create Date: 2026-10-17 00:00:00.000000

This is the initial migration that creates every table of the marketplace:
- Accounts and profiles (users, venues, artists, bands, band members)
- Gig listings and applications with their ranked booking sequence
- Calendar availability
- Analytics events
- Admin dashboard accounts

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20261017_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    ]


def upgrade() -> None:
    """Create all tables."""

    # Create users table
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("password_hash", sa.String(), nullable=True),
        sa.Column("role", sa.String(16), nullable=False),
        sa.Column("two_factor_enabled", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("face_verified", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("profile_completed", sa.Boolean(), server_default=sa.false(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
        sa.UniqueConstraint("phone"),
        sa.CheckConstraint("role IN ('venue', 'artist', 'band')", name="ck_users_role"),
    )

    # Create venues table
    op.create_table(
        "venues",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("address", sa.String(), nullable=True),
        sa.Column("type", sa.String(32), nullable=False),
        sa.Column("esrb_rating", sa.String(16), nullable=False),
        sa.Column("typical_genres", JSONB(), server_default=sa.text("'[]'::jsonb"), nullable=False),
        sa.Column("stage_details", JSONB(), server_default=sa.text("'{}'::jsonb"), nullable=False),
        sa.Column("equipment_onsite", JSONB(), server_default=sa.text("'[]'::jsonb"), nullable=False),
        sa.Column("special_instructions", sa.String(), nullable=True),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.CheckConstraint("type IN ('hotel', 'restaurant', 'bar', 'dive', 'church')", name="ck_venues_type"),
        sa.CheckConstraint("esrb_rating IN ('family', '21+', 'nsfw')", name="ck_venues_esrb_rating"),
        sa.Index("ix_venues_user_id", "user_id"),
    )

    # Create artists table
    op.create_table(
        "artists",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("genre", JSONB(), nullable=False),
        sa.Column("instruments", JSONB(), nullable=False),
        sa.Column("zip_code", sa.String(), nullable=True),
        sa.Column("gender", sa.String(), nullable=True),
        sa.Column("email_or_phone", sa.String(), nullable=True),
        sa.Column("preview_song", sa.String(), nullable=True),
        sa.Column("profile_picture", sa.String(), nullable=True),
        sa.Column("city_of_origin", sa.String(), nullable=True),
        sa.Column("open_to_work", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column("bio", sa.String(), nullable=True),
        sa.Column("face_verified", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.Index("ix_artists_user_id", "user_id"),
        sa.Index("ix_artists_open_to_work", "open_to_work"),
    )

    # Create bands table
    op.create_table(
        "bands",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("image", sa.String(), nullable=True),
        sa.Column("phone", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("genre", sa.String(), nullable=False),
        sa.Column("equipment", JSONB(), server_default=sa.text("'[]'::jsonb"), nullable=False),
        sa.Column("profile_picture", sa.String(), nullable=False),
        sa.Column("social_links", JSONB(), server_default=sa.text("'{}'::jsonb"), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.Index("ix_bands_user_id", "user_id"),
    )

    # Create band_members table
    op.create_table(
        "band_members",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("role", sa.String(), nullable=False),
        sa.Column("instrument", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("band_id", sa.Uuid(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["band_id"], ["bands.id"], ondelete="CASCADE"),
        sa.Index("ix_band_members_band_id", "band_id"),
    )

    # Create gigs table
    op.create_table(
        "gigs",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("venue_id", sa.Uuid(), nullable=True),
        sa.Column("venue", sa.String(), nullable=False),
        sa.Column("location", sa.String(), nullable=False),
        sa.Column("date", sa.String(), nullable=False),
        sa.Column("time", sa.String(), nullable=False),
        sa.Column("price", sa.String(), nullable=False),
        sa.Column("genre", JSONB(), nullable=False),
        sa.Column("is_verified", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("image", sa.String(), nullable=True),
        sa.Column("stage", sa.String(), nullable=True),
        sa.Column("is_recurring", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("frequency", sa.String(16), nullable=True),
        sa.Column("status", sa.String(16), server_default="draft", nullable=False),
        sa.Column("is_tips_only", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("payment_type", sa.String(16), server_default="flat_fee", nullable=False),
        sa.Column("esrb_rating", sa.String(16), server_default="family", nullable=False),
        sa.Column("equipment_provided", JSONB(), server_default=sa.text("'[]'::jsonb"), nullable=False),
        sa.Column("posting_schedule", JSONB(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["venue_id"], ["venues.id"], ondelete="CASCADE"),
        sa.CheckConstraint("frequency IN ('daily', 'weekly', 'monthly')", name="ck_gigs_frequency"),
        sa.CheckConstraint(
            "status IN ('draft', 'published', 'confirmed', 'applied', 'pending')", name="ck_gigs_status"
        ),
        sa.CheckConstraint("payment_type IN ('tips', 'hourly', 'flat_fee', 'in_kind')", name="ck_gigs_payment_type"),
        sa.CheckConstraint("esrb_rating IN ('family', '21+', 'nsfw')", name="ck_gigs_esrb_rating"),
        sa.Index("ix_gigs_venue_id", "venue_id"),
        sa.Index("ix_gigs_date", "date"),
        sa.Index("ix_gigs_status", "status"),
    )

    # Create gig_applicants table
    op.create_table(
        "gig_applicants",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("gig_id", sa.Uuid(), nullable=False),
        sa.Column("band_id", sa.Uuid(), nullable=False),
        sa.Column("band_name", sa.String(), nullable=False),
        sa.Column("applied_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("status", sa.String(16), server_default="pending", nullable=False),
        sa.Column("rank", sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["gig_id"], ["gigs.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["band_id"], ["bands.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("gig_id", "band_id", name="uq_gig_applicants_gig_band"),
        sa.CheckConstraint("status IN ('pending', 'accepted', 'rejected')", name="ck_gig_applicants_status"),
        sa.Index("ix_gig_applicants_gig_id", "gig_id"),
    )

    # Create calendar_availability table
    op.create_table(
        "calendar_availability",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("is_available", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("user_id", "date", name="uq_calendar_availability_user_date"),
        sa.Index("ix_calendar_availability_user_id", "user_id"),
    )

    # Create analytics_events table
    op.create_table(
        "analytics_events",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("event", sa.String(), nullable=False),
        sa.Column("properties", JSONB(), server_default=sa.text("'{}'::jsonb"), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="SET NULL"),
        sa.Index("ix_analytics_events_event", "event"),
        sa.Index("ix_analytics_events_timestamp", "timestamp"),
        sa.Index("ix_analytics_events_user_id", "user_id"),
    )

    # Create admin_users table
    op.create_table(
        "admin_users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("username", sa.String(), nullable=False),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("last_login", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
    )


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    op.drop_table("admin_users")
    op.drop_table("analytics_events")
    op.drop_table("calendar_availability")
    op.drop_table("gig_applicants")
    op.drop_table("gigs")
    op.drop_table("band_members")
    op.drop_table("bands")
    op.drop_table("artists")
    op.drop_table("venues")
    op.drop_table("users")
