"""Shared fixtures for API tests."""

import asyncio
from collections.abc import AsyncGenerator, Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from product_catalog.infrastructure.database import create_tables, get_session
from product_catalog.main import app


@pytest.fixture
def client(tmp_path: Path) -> Iterator[TestClient]:
    """Create test client backed by a fresh SQLite database file."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}",
        poolclass=NullPool,
    )
    asyncio.run(create_tables(engine))
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()
    asyncio.run(engine.dispose())


@pytest.fixture
def category(client: TestClient) -> dict:
    """Create an Electronics category through the API."""
    response = client.post(
        "/api/categories",
        json={"name": "Electronics", "description": "Electronic devices and gadgets"},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def create_product(client: TestClient, category: dict):
    """Factory creating products through the API."""

    def _create(**overrides) -> dict:
        body = {
            "name": "Laptop",
            "description": "High-performance laptop computer",
            "price": 999.99,
            "categoryId": category["id"],
            "stockQuantity": 50,
        }
        body.update(overrides)
        response = client.post("/api/products", json=body)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
