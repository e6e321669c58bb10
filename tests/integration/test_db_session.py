"""Tests for the request-scoped session dependency on in-memory SQLite."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from catalog.domain.entities import Product
from catalog.infrastructure.database import Base, session as db_session
from catalog.infrastructure.database.repositories import SQLAlchemyProductRepository


@pytest_asyncio.fixture
async def session_factory(monkeypatch) -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    monkeypatch.setattr(db_session, "async_session_factory", factory)
    yield factory
    await engine.dispose()


async def _stored_barcodes(factory: async_sessionmaker[AsyncSession]) -> list[str]:
    async with factory() as session:
        return [p.barcode for p in await SQLAlchemyProductRepository(session).get_all()]


@pytest.mark.asyncio
async def test_error_during_request_rolls_back(session_factory):
    dependency = db_session.get_db_session()
    session = await anext(dependency)
    await SQLAlchemyProductRepository(session).add(Product(name="Widget", barcode="W-001", rate=9.99))

    with pytest.raises(RuntimeError, match="handler failed"):
        await dependency.athrow(RuntimeError("handler failed"))

    assert await _stored_barcodes(session_factory) == []


@pytest.mark.asyncio
async def test_successful_request_commits(session_factory):
    dependency = db_session.get_db_session()
    session = await anext(dependency)
    await SQLAlchemyProductRepository(session).add(Product(name="Widget", barcode="W-001", rate=9.99))

    with pytest.raises(StopAsyncIteration):
        await anext(dependency)

    assert await _stored_barcodes(session_factory) == ["W-001"]
