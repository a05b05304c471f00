"""Shared fixtures for Product Catalog tests."""

import os
from collections.abc import AsyncGenerator, Awaitable, Callable
from datetime import datetime, timedelta, timezone
from decimal import Decimal

# Point the application at SQLite before any product_catalog import
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"

import pytest_asyncio
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from product_catalog.catalog.models import Category, Product
from product_catalog.infrastructure.database import create_tables

CategoryFactory = Callable[..., Awaitable[Category]]
ProductFactory = Callable[..., Awaitable[Product]]


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an in-memory SQLite engine with the catalog schema."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session bound to the test engine."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def make_category(session: AsyncSession) -> CategoryFactory:
    """Factory inserting a category row directly."""

    async def _make(
        name: str = "Electronics",
        description: str | None = "Electronic devices and gadgets",
        is_active: bool = True,
    ) -> Category:
        category = Category(name=name, description=description, is_active=is_active)
        session.add(category)
        await session.commit()
        return category

    return _make


@pytest_asyncio.fixture
async def make_product(session: AsyncSession) -> ProductFactory:
    """Factory inserting a product row directly.

    Each product gets a creation time one minute after the previous one,
    so ordering by creation date follows insertion order.
    """
    base_time = datetime(2026, 1, 1, tzinfo=timezone.utc)
    created = 0

    async def _make(
        category: Category,
        name: str = "Laptop",
        price: str = "999.99",
        description: str | None = None,
        stock_quantity: int = 10,
        is_active: bool = True,
    ) -> Product:
        nonlocal created
        product = Product(
            name=name,
            description=description,
            price=Decimal(price),
            category_id=category.id,
            stock_quantity=stock_quantity,
            created_date=base_time + timedelta(minutes=created),
            is_active=is_active,
        )
        created += 1
        session.add(product)
        await session.commit()
        return product

    return _make
