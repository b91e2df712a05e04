# -*- coding: utf-8 -*-
"""
Общие фикстуры для тестирования
"""

import os

# Настройки читаются при импорте приложения, поэтому задаем их заранее
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("AUTO_MIGRATE", "false")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (AsyncSession, async_sessionmaker,  # noqa: E402
                                    create_async_engine)
from sqlalchemy.pool import StaticPool  # noqa: E402

from edcenter.clients.database_client import get_db  # noqa: E402
from edcenter.domain.models import Base  # noqa: E402
from edcenter.main import app  # noqa: E402

# Тестовая база данных в памяти
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine():
    """Создать тестовый движок БД с чистыми таблицами."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def test_session(test_engine):
    """Создать тестовую сессию БД."""
    async_session_maker = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )

    async with async_session_maker() as session:
        yield session


@pytest.fixture
async def async_client(test_session):
    """Создать асинхронный тестовый клиент для API."""

    async def override_get_db():
        yield test_session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()
