"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures for the in-memory database, the
property mapping service and an HTTP client wired to the application.
"""

import os

import pytest
import pytest_asyncio

# Point the application at an in-memory database before importing it
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("ENVIRONMENT", "testing")

from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

import course_library.models  # noqa: E402,F401
from course_library import application  # noqa: E402
from course_library.storage.db import (  # noqa: E402
    enable_sqlite_foreign_keys,
    get_session,
)
from course_library.storage.property_mapping import (  # noqa: E402
    build_property_mapping_service,
)
from course_library.storage.seed import seed_authors  # noqa: E402


@pytest_asyncio.fixture
async def engine():
    """
    Provides an in-memory SQLite engine with every table created.

    StaticPool keeps a single connection so all sessions see the same
    in-memory database.
    """
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(test_engine)
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine

    await test_engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    """Provides a session on the in-memory database."""
    async with AsyncSession(engine, expire_on_commit=False) as db_session:
        yield db_session


@pytest_asyncio.fixture
async def seeded_session(session):
    """Provides a session on a database holding the sample authors."""
    await seed_authors(session)
    await session.commit()
    return session


@pytest.fixture
def mapping_service():
    """Provides the property mapping service used by the application."""
    return build_property_mapping_service()


@pytest.fixture
def app(engine):
    """
    Provides the application with its session bound to the test database.

    Each request gets its own session and commits at the end, like the
    production dependency.
    """
    test_app = application()

    async def override_get_session():
        async with AsyncSession(engine, expire_on_commit=False) as db_session:
            try:
                yield db_session
                await db_session.commit()
            except Exception:
                await db_session.rollback()
                raise

    test_app.dependency_overrides[get_session] = override_get_session
    return test_app


@pytest_asyncio.fixture
async def client(app):
    """Provides an HTTP client for the application."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as http_client:
        yield http_client


@pytest_asyncio.fixture
async def seeded_client(client, seeded_session):
    """Provides an HTTP client for an application holding sample authors."""
    return client
