"""
Pytest configuration and shared fixtures.

Database fixtures run against an in-memory SQLite database shared by
every session of a test (StaticPool), so API requests and direct
queries see the same data.
"""

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import devmatch.models  # noqa: F401  (registers tables)
from devmatch.auth import COOKIE_NAME, create_session_token
from devmatch.database import Base, get_db
from devmatch.models import User


@pytest_asyncio.fixture
async def db_engine():
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
async def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def create_user(db_session):
    """Factory that inserts a GitHub-linked user; keyword args override defaults."""
    counter = {"n": 0}

    async def _create(**overrides) -> User:
        counter["n"] += 1
        n = counter["n"]
        data = {
            "github_id": str(1000 + n),
            "username": f"dev{n}",
            "name": f"Developer {n}",
            "languages": [],
            "repos": [],
            "activity_level": "medium",
            "interests": [],
            "location": None,
        }
        data.update(overrides)
        user = User(**data)
        db_session.add(user)
        await db_session.commit()
        await db_session.refresh(user)
        return user

    return _create


@pytest_asyncio.fixture
async def app(session_factory):
    from devmatch.main import app as fastapi_app

    async def override_get_db():
        async with session_factory() as session:
            yield session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c


@pytest.fixture
def auth_headers():
    """Builds a Cookie header carrying a valid session for a user id."""

    def _headers(user_id: str) -> dict:
        return {"Cookie": f"{COOKIE_NAME}={create_session_token(user_id)}"}

    return _headers
