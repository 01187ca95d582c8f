"""Initial schema and seed data for EcoWaste

Revision ID: 20261016_000000
Revises: None
Create Date: 2026-10-16 00:00:00.000000

This is the initial migration that creates all tables and seeds default data
for the EcoWaste service. This includes:
- Users and waste entries
- Pickup schedules and community reports
- Cleanup events and their participants
- Eco challenges, rewards and per-user progress/redemptions
- Quiz attempts
- A starter rewards catalogue and challenge set

Revision format: YYYYMMDD_HHMMSS_description

"""

from datetime import datetime, timezone
from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20261016_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables and seed initial data."""

    # Create users table
    op.create_table(
        "users",
        sa.Column("id", sa.String(128), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("first_name", sa.String(100), nullable=True),
        sa.Column("last_name", sa.String(100), nullable=True),
        sa.Column("profile_image_url", sa.String(512), nullable=True),
        sa.Column("eco_points", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("carbon_footprint", sa.Float(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )

    # Create waste_entries table
    op.create_table(
        "waste_entries",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("waste_type", sa.String(64), nullable=False),
        sa.Column("quantity", sa.Float(), nullable=False),
        sa.Column("unit", sa.String(16), nullable=False),
        sa.Column("disposal_method", sa.String(64), nullable=True),
        sa.Column("image_url", sa.String(512), nullable=True),
        sa.Column("eco_points_earned", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.Index("ix_waste_entries_user_id", "user_id"),
        sa.Index("ix_waste_entries_waste_type", "waste_type"),
        sa.Index("ix_waste_entries_created_at", "created_at"),
    )

    # Create pickup_schedules table
    op.create_table(
        "pickup_schedules",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("scheduled_date", sa.DateTime(), nullable=False),
        sa.Column("address", sa.String(512), nullable=False),
        sa.Column("waste_types", sa.JSON(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("status", sa.String(32), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("completed_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.Index("ix_pickup_schedules_user_id", "user_id"),
        sa.Index("ix_pickup_schedules_scheduled_date", "scheduled_date"),
        sa.Index("ix_pickup_schedules_status", "status"),
    )

    # Create community_reports table
    op.create_table(
        "community_reports",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("report_type", sa.String(64), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("location", sa.String(512), nullable=False),
        sa.Column("priority", sa.String(16), nullable=False),
        sa.Column("status", sa.String(32), nullable=False),
        sa.Column("image_url", sa.String(512), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("resolved_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.Index("ix_community_reports_user_id", "user_id"),
        sa.Index("ix_community_reports_status", "status"),
        sa.Index("ix_community_reports_created_at", "created_at"),
    )

    # Create cleanup_events table
    op.create_table(
        "cleanup_events",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("organizer_id", sa.String(128), nullable=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("location", sa.String(512), nullable=False),
        sa.Column("event_date", sa.DateTime(), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("max_participants", sa.Integer(), nullable=True),
        sa.Column("current_participants", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("eco_points_reward", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("status", sa.String(32), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["organizer_id"], ["users.id"]),
        sa.Index("ix_cleanup_events_event_date", "event_date"),
        sa.Index("ix_cleanup_events_status", "status"),
    )

    # Create event_participants table
    op.create_table(
        "event_participants",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("event_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("joined_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["event_id"], ["cleanup_events.id"]),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.UniqueConstraint("event_id", "user_id", name="uq_event_participants_event_user"),
        sa.Index("ix_event_participants_event_id", "event_id"),
        sa.Index("ix_event_participants_user_id", "user_id"),
    )

    # Create eco_challenges table
    op.create_table(
        "eco_challenges",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("challenge_type", sa.String(64), nullable=False),
        sa.Column("target_value", sa.Integer(), nullable=False),
        sa.Column("eco_points_reward", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("start_date", sa.DateTime(), nullable=False),
        sa.Column("end_date", sa.DateTime(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_eco_challenges_end_date", "end_date"),
        sa.Index("ix_eco_challenges_is_active", "is_active"),
    )

    # Create user_challenge_progress table
    op.create_table(
        "user_challenge_progress",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("challenge_id", sa.Integer(), nullable=False),
        sa.Column("current_progress", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("completed_at", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["challenge_id"], ["eco_challenges.id"]),
        sa.UniqueConstraint("user_id", "challenge_id", name="uq_user_challenge_progress_user_challenge"),
        sa.Index("ix_user_challenge_progress_user_id", "user_id"),
        sa.Index("ix_user_challenge_progress_challenge_id", "challenge_id"),
        sa.Index("ix_user_challenge_progress_created_at", "created_at"),
    )

    # Create rewards table
    op.create_table(
        "rewards",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(64), nullable=True),
        sa.Column("eco_points_cost", sa.Integer(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("valid_until", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_rewards_is_active", "is_active"),
    )

    # Create user_rewards table
    op.create_table(
        "user_rewards",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("reward_id", sa.Integer(), nullable=False),
        sa.Column("redemption_code", sa.String(64), nullable=False),
        sa.Column("redeemed_at", sa.DateTime(), nullable=False),
        sa.Column("expires_at", sa.DateTime(), nullable=True),
        sa.Column("is_used", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["reward_id"], ["rewards.id"]),
        sa.UniqueConstraint("redemption_code"),
        sa.Index("ix_user_rewards_user_id", "user_id"),
        sa.Index("ix_user_rewards_reward_id", "reward_id"),
        sa.Index("ix_user_rewards_redeemed_at", "redeemed_at"),
    )

    # Create quiz_attempts table
    op.create_table(
        "quiz_attempts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("topic", sa.String(200), nullable=False),
        sa.Column("difficulty", sa.String(16), nullable=False),
        sa.Column("total_questions", sa.Integer(), nullable=False),
        sa.Column("correct_answers", sa.Integer(), nullable=False),
        sa.Column("score", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.Index("ix_quiz_attempts_user_id", "user_id"),
        sa.Index("ix_quiz_attempts_created_at", "created_at"),
    )

    # Seed data
    now = datetime.now(timezone.utc).replace(tzinfo=None)

    rewards_table = sa.table(
        "rewards",
        sa.column("title", sa.String),
        sa.column("description", sa.Text),
        sa.column("category", sa.String),
        sa.column("eco_points_cost", sa.Integer),
        sa.column("is_active", sa.Boolean),
        sa.column("created_at", sa.DateTime),
    )
    op.bulk_insert(
        rewards_table,
        [
            {
                "title": "Reusable Water Bottle",
                "description": "Stainless steel bottle from a local partner store.",
                "category": "product",
                "eco_points_cost": 200,
                "is_active": True,
                "created_at": now,
            },
            {
                "title": "Coffee Shop Voucher",
                "description": "One free drink when you bring your own cup.",
                "category": "voucher",
                "eco_points_cost": 100,
                "is_active": True,
                "created_at": now,
            },
            {
                "title": "Plant a Tree",
                "description": "A tree planted in your name by a reforestation partner.",
                "category": "donation",
                "eco_points_cost": 500,
                "is_active": True,
                "created_at": now,
            },
        ],
    )

    challenges_table = sa.table(
        "eco_challenges",
        sa.column("title", sa.String),
        sa.column("description", sa.Text),
        sa.column("challenge_type", sa.String),
        sa.column("target_value", sa.Integer),
        sa.column("eco_points_reward", sa.Integer),
        sa.column("start_date", sa.DateTime),
        sa.column("end_date", sa.DateTime),
        sa.column("is_active", sa.Boolean),
    )
    op.bulk_insert(
        challenges_table,
        [
            {
                "title": "Recycling Week",
                "description": "Log 10 recycled waste entries.",
                "challenge_type": "waste_entries",
                "target_value": 10,
                "eco_points_reward": 150,
                "start_date": now,
                "end_date": datetime(now.year + 1, 1, 1),
                "is_active": True,
            },
            {
                "title": "Community Hero",
                "description": "Join 3 cleanup events.",
                "challenge_type": "cleanup_events",
                "target_value": 3,
                "eco_points_reward": 300,
                "start_date": now,
                "end_date": datetime(now.year + 1, 1, 1),
                "is_active": True,
            },
        ],
    )


def downgrade() -> None:
    """Drop all tables created in upgrade."""
    op.drop_table("quiz_attempts")
    op.drop_table("user_rewards")
    op.drop_table("rewards")
    op.drop_table("user_challenge_progress")
    op.drop_table("eco_challenges")
    op.drop_table("event_participants")
    op.drop_table("cleanup_events")
    op.drop_table("community_reports")
    op.drop_table("pickup_schedules")
    op.drop_table("waste_entries")
    op.drop_table("users")
