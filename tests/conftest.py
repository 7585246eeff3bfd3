"""
Test fixtures for the Card Records API test suite.

  - db_engine / db_session: Fresh in-memory SQLite database for each test
  - client: Async HTTP test client wired to the test database
  - failing_client: Test client whose card store raises on every call
  - valid_payload: A create payload that passes every rule
  - create_card: Helper that POSTs a card and returns the response

In-memory SQLite (sqlite+aiosqlite://) keeps each test isolated: every test
gets a completely fresh database. get_db is overridden so the application
code runs exactly as it does in production, only against the test engine.
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from app.database import Base, get_db
from app.dependencies import get_card_repository
from app.main import app
from app.repositories.card_repository import CardRepository


# In-memory SQLite for fast, isolated tests
TEST_DATABASE_URL = "sqlite+aiosqlite://"

API_CARDS = "/api/cards"


@pytest_asyncio.fixture
async def db_engine():
    """Create a fresh async engine with all tables for each test."""
    engine = create_async_engine(TEST_DATABASE_URL)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    """Provide an async session bound to the test engine."""
    async_session = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with async_session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_engine):
    """
    Async HTTP test client with the test database injected.

    Overrides the get_db dependency so all requests hit the in-memory
    test database instead of the real one.
    """
    async_session = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db():
        async with async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


class FailingCardRepository(CardRepository):
    """Card store whose every operation fails like a broken database."""

    def __init__(self, error: Exception):
        self.error = error

    async def find_by_user(self, user_id):
        raise self.error

    async def save(self, card):
        raise self.error

    async def exists_by_id(self, card_id):
        raise self.error

    async def delete_by_id(self, card_id):
        raise self.error


@pytest_asyncio.fixture
async def failing_client():
    """Test client whose card store raises RuntimeError("database unavailable")."""
    app.dependency_overrides[get_card_repository] = (
        lambda: FailingCardRepository(RuntimeError("database unavailable"))
    )

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def valid_payload():
    """A create payload that satisfies every rule."""
    return {
        "userId": 1,
        "contactNumber": "1234567890",
        "cardAccountNumber": "12345678901234",
        "accountType": "DEBIT",
        "initialBalance": "100.00",
    }


@pytest.fixture
def create_card(client, valid_payload):
    """POST a card (valid_payload merged with overrides) and return the response."""

    async def _create(**overrides):
        return await client.post(API_CARDS, json={**valid_payload, **overrides})

    return _create
