from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from quoteproxy.database import Base, get_db
from quoteproxy.main import app
from quoteproxy.services.quote_providers import QuoteProvider

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"

engine = create_async_engine(TEST_DB_URL, echo=False)
TestSession = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture(autouse=True)
async def setup_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def db():
    async with TestSession() as session:
        yield session


@pytest.fixture
def provider():
    """A QuoteProvider stub wired in wherever the services look one up."""
    mock = MagicMock(spec=QuoteProvider)
    mock.fetch_quote = AsyncMock()
    mock.fetch_symbols = AsyncMock(return_value=[])
    with (
        patch("quoteproxy.services.quote_service.get_quote_provider", return_value=mock),
        patch("quoteproxy.services.catalog_loader.get_quote_provider", return_value=mock),
    ):
        yield mock


@pytest.fixture
async def client(db):
    async def override_get_db():
        async with TestSession() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
