import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from autodidact.db.base import Base
from autodidact.db.session import get_db
from autodidact.main import app
from autodidact.services.seeding import seed_questions


@pytest.fixture
def tmp_db_url(tmp_path):
    """Provide a temporary SQLite database URL for tests."""
    return f"sqlite+aiosqlite:///{tmp_path / 'test_autodidact.db'}"


@pytest_asyncio.fixture
async def session_factory(tmp_db_url):
    engine = create_async_engine(tmp_db_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as db:
        await seed_questions(db)
    yield factory
    await engine.dispose()


@pytest_asyncio.fixture
async def api_client(session_factory):
    """httpx client wired to the app, backed by a seeded temporary database."""

    async def override_get_db():
        async with session_factory() as db:
            yield db

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()
