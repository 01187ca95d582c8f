"""Test configuration for core unit tests.

This module provides common fixtures for testing the database layer and the
storage facade against an in-memory SQLite database.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import AsyncGenerator

import pytest_asyncio
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel.pool import StaticPool

from ecowaste.core.database import create_all, create_engine, create_sessionmaker, utc_now
from ecowaste.core.database.entities import CleanupEvent, EcoChallenge, Reward, User
from ecowaste.core.storage import DatabaseStorage


@pytest_asyncio.fixture
async def in_memory_engine() -> AsyncGenerator:
    """Create in-memory SQLite engine with all tables."""
    engine = create_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    await create_all(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def in_memory_session(in_memory_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create in-memory SQLite session for testing."""
    async with create_sessionmaker(in_memory_engine)() as session:
        yield session


@pytest_asyncio.fixture
async def storage(in_memory_session: AsyncSession) -> DatabaseStorage:
    return DatabaseStorage(in_memory_session)


@pytest_asyncio.fixture
async def user(in_memory_session: AsyncSession) -> User:
    """A persisted user with 100 EcoPoints."""
    entity = User(id="user-1", email="ada@example.com", first_name="Ada", eco_points=100)
    in_memory_session.add(entity)
    await in_memory_session.commit()
    return entity


@pytest_asyncio.fixture
async def reward(in_memory_session: AsyncSession) -> Reward:
    entity = Reward(
        title="Coffee Voucher",
        category="voucher",
        eco_points_cost=60,
        valid_until=datetime(2030, 1, 1),
    )
    in_memory_session.add(entity)
    await in_memory_session.commit()
    await in_memory_session.refresh(entity)
    return entity


@pytest_asyncio.fixture
async def upcoming_event(in_memory_session: AsyncSession) -> CleanupEvent:
    entity = CleanupEvent(
        title="Beach Cleanup",
        location="North Beach",
        event_date=utc_now() + timedelta(days=7),
        max_participants=2,
        eco_points_reward=50,
    )
    in_memory_session.add(entity)
    await in_memory_session.commit()
    await in_memory_session.refresh(entity)
    return entity


@pytest_asyncio.fixture
async def challenge(in_memory_session: AsyncSession) -> EcoChallenge:
    entity = EcoChallenge(
        title="Recycling Week",
        challenge_type="waste_entries",
        target_value=10,
        eco_points_reward=150,
        start_date=utc_now() - timedelta(days=1),
        end_date=utc_now() + timedelta(days=6),
    )
    in_memory_session.add(entity)
    await in_memory_session.commit()
    await in_memory_session.refresh(entity)
    return entity
