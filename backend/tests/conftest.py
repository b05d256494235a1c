"""Pytest configuration and shared fixtures.

This module provides centralized test fixtures for:
- In-memory SQLite engine and sessions
- HTTP client for API testing
- Sample author data
"""

from datetime import date

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from courselib.database import Base, get_db
from courselib.main import app
from courselib.mapping.author import register_property_mappings
from courselib.models import Author, Course


@pytest.fixture(autouse=True)
def property_mappings():
    """Make sure the registry is populated, as the app lifespan would."""
    register_property_mappings()


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def test_engine():
    """In-memory SQLite engine shared by every session in one test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine) -> AsyncSession:
    session_maker = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        yield session


# =============================================================================
# HTTP Client Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def client(test_engine):
    """Async test client for the app, bound to the test database."""
    test_session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db():
        async with test_session_maker() as session:
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

    app.dependency_overrides.pop(get_db, None)


# =============================================================================
# Sample Data
# =============================================================================

SAMPLE_AUTHORS = [
    ("Anne", "Zimmer", date(1960, 1, 15), "Rum"),
    ("Anne", "Brown", date(1970, 6, 1), "Maps"),
    ("Carl", "Young", date(1955, 3, 9), "Ships"),
    ("Dora", "Xu", date(1980, 11, 30), "Singing"),
    ("Eli", "Walker", date(1990, 2, 2), "Rum"),
    ("Eli", "Adams", date(1985, 8, 20), "Maps"),
    ("Finn", "Voss", date(1975, 5, 5), "Ships"),
]


@pytest_asyncio.fixture
async def authors(db_session) -> list[Author]:
    """Seven committed authors; Carl Young has one course."""
    records = [
        Author(first_name=first, last_name=last, date_of_birth=born, main_category=category)
        for first, last, born, category in SAMPLE_AUTHORS
    ]
    records[2].courses = [
        Course(title="Commandeering a Ship", description="Without getting caught."),
    ]
    db_session.add_all(records)
    await db_session.commit()
    return records
