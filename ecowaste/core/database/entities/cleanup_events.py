"""
Cleanup event entity models.

This module contains the database entities for community cleanup events and
their participants. ``current_participants`` is a denormalized counter of the
``event_participants`` rows for the event.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import Field

from ..base import Base, utc_now


class CleanupEvent(Base, table=True):
    """Entity for a scheduled community cleanup.

    ``max_participants`` of None means the event is uncapped.

    Table: cleanup_events
    """

    __tablename__ = "cleanup_events"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    organizer_id: Optional[str] = Field(default=None, foreign_key="users.id", max_length=128)

    title: str = Field(max_length=200)
    description: Optional[str] = Field(default=None)
    location: str = Field(max_length=512)
    event_date: datetime = Field(index=True, sa_type=DateTime)
    duration: int = Field(default=120, description="Duration in minutes")

    max_participants: Optional[int] = Field(default=None)
    current_participants: int = Field(default=0)
    eco_points_reward: int = Field(default=0)

    status: str = Field(default="upcoming", max_length=32, index=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)

    def __repr__(self) -> str:
        return (
            f"CleanupEvent(id={self.id}, title={self.title}, "
            f"participants={self.current_participants}/{self.max_participants})"
        )


class EventParticipant(Base, table=True):
    """Membership of a user in a cleanup event.

    Table: event_participants
    """

    __tablename__ = "event_participants"
    __table_args__ = (
        UniqueConstraint("event_id", "user_id", name="uq_event_participants_event_user"),
        {"extend_existing": True},
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    event_id: int = Field(foreign_key="cleanup_events.id", index=True)
    user_id: str = Field(foreign_key="users.id", max_length=128, index=True)
    joined_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)

    def __repr__(self) -> str:
        return f"EventParticipant(event_id={self.event_id}, user_id={self.user_id})"
