from datetime import datetime, timedelta
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel.pool import StaticPool

from ecowaste.core.database import create_all, create_engine, create_sessionmaker, utc_now
from ecowaste.core.database.entities import CleanupEvent, EcoChallenge, Reward, User

# In-memory SQLite shared by every connection of the test engine
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_USER_ID = "user-1"


@pytest_asyncio.fixture
async def test_engine():
    """Create a test database engine with all tables."""
    engine = create_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    await create_all(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a new session for each test."""
    async with create_sessionmaker(test_engine)() as session:
        yield session


@pytest_asyncio.fixture(name="client")
async def client_fixture(session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with overridden dependencies."""
    from ecowaste.core.database.session import get_session
    from ecowaste.learning import QuizGenerator
    from ecowaste.server.main import app
    from ecowaste.server.services.deps import get_quiz_generator

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_quiz_generator] = lambda: QuizGenerator(model=None)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> dict:
    return {"X-User-Id": TEST_USER_ID}


@pytest_asyncio.fixture
async def seeded(session: AsyncSession) -> dict:
    """A user with 100 EcoPoints plus one reward, event and challenge.

    Returns the ids only, so tests never touch instances expired by a rollback.
    """
    user = User(id=TEST_USER_ID, email="ada@example.com", first_name="Ada", eco_points=100)
    reward = Reward(title="Coffee Voucher", eco_points_cost=60, valid_until=datetime(2030, 1, 1))
    event = CleanupEvent(
        title="Beach Cleanup",
        location="North Beach",
        event_date=utc_now() + timedelta(days=7),
        max_participants=1,
        eco_points_reward=50,
    )
    challenge = EcoChallenge(
        title="Recycling Week",
        challenge_type="waste_entries",
        target_value=10,
        eco_points_reward=150,
        start_date=utc_now(),
        end_date=utc_now() + timedelta(days=7),
    )
    session.add_all([user, reward, event, challenge])
    await session.commit()
    return {"user_id": user.id, "reward_id": reward.id, "event_id": event.id, "challenge_id": challenge.id}
