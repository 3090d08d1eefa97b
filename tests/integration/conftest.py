"""Pytest configuration and fixtures for integration tests."""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from ordering.data.models import Base
from ordering.infrastructure.database import get_session_factory
from ordering.infrastructure.event_bus import InMemoryEventBus


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def file_engine(tmp_path):
    """File-backed engine; separate connections per session, for concurrency tests."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'ordering.db'}")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    """Create test session factory."""
    return get_session_factory(bind=test_engine)


@pytest.fixture
def event_bus():
    return InMemoryEventBus()


@pytest.fixture
def published(event_bus):
    """Events delivered by the bus during the test, in order."""
    events = []
    event_bus.subscribe(None, events.append)
    return events
