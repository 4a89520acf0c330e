"""
Library API Backend — Test Configuration (conftest.py)
=======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, created fresh for each test):
    ├── mock_repository:  AsyncMock built from the BookRepository contract
    ├── sample_book_data: Field values for a persisted book
    ├── sample_book:      ORM Book built from sample_book_data
    ├── db_engine:        aiosqlite engine on a temporary file, tables created
    ├── db_session:       AsyncSession bound to db_engine
    ├── test_app:         Fresh app whose session dependency points at db_engine
    └── test_client:      HTTPX AsyncClient talking to test_app
"""

import os

# Override settings for testing BEFORE any application imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from library_api.database import Base, get_db_session
from library_api.models.book import Book
from library_api.repositories import BookRepository


# ══════════════════════════════════════════════════════════════════════════
# Unit-test Fixtures (no database)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_repository():
    """
    Provides a mock storage adapter.

    Usage:
        async def test_get(mock_repository, sample_book):
            mock_repository.find_by_id.return_value = sample_book
            result = await BookService(mock_repository).get_book_by_id(1)
    """
    return AsyncMock(spec=BookRepository)


@pytest.fixture
def sample_book_data():
    return {
        "id": 1,
        "title": "Dune",
        "author": "Frank Herbert",
        "isbn": "9780441172719",
        "published_year": 1965,
        "available": False,
    }


@pytest.fixture
def sample_book(sample_book_data):
    """A detached ORM Book; column defaults are not applied outside a session."""
    return Book(**sample_book_data)


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures (temporary SQLite file)
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """
    Provides an async engine on a throwaway SQLite file with all tables created.

    A file (not :memory:) lets separate sessions, one per HTTP request, see
    each other's committed rows.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'library.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
def test_app(db_engine):
    """
    Provides a fresh FastAPI app whose get_db_session dependency yields
    sessions on the test engine (same commit/rollback behavior).

    Tests may add further entries to `test_app.dependency_overrides`.
    """
    from library_api.main import create_app

    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db_session():
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app = create_app()
    app.dependency_overrides[get_db_session] = override_get_db_session
    return app


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    Provides an async HTTP test client for endpoint testing.

    How:   Routes requests straight into test_app through ASGITransport.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
