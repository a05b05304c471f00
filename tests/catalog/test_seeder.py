"""Tests for catalog seeding."""

from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from product_catalog.catalog.repository import CategoryRepository, ProductRepository
from product_catalog.catalog.search import ProductSearchCriteria
from product_catalog.catalog.seeder import SEED_CATEGORIES, SEED_PRODUCTS, seed_catalog


def test_seed_data_shape() -> None:
    """Seed data has five categories and twenty products."""
    assert len(SEED_CATEGORIES) == 5
    assert sum(len(items) for items in SEED_PRODUCTS.values()) == 20
    assert set(SEED_PRODUCTS) <= {name for name, _ in SEED_CATEGORIES}


@pytest.mark.asyncio
async def test_seed_empty_catalog(session: AsyncSession) -> None:
    """Seeding an empty catalog creates every category and product."""
    result = await seed_catalog(session)

    assert result == {"seeded": True, "categories_created": 5, "products_created": 20}

    categories = await CategoryRepository(session).list_active()
    counts = {category.name: count for category, count in categories}
    assert counts == {
        "Books": 4,
        "Clothing": 4,
        "Electronics": 5,
        "Home & Garden": 4,
        "Sports": 3,
    }


@pytest.mark.asyncio
async def test_seed_is_idempotent(session: AsyncSession) -> None:
    """Seeding twice leaves the catalog unchanged."""
    await seed_catalog(session)
    result = await seed_catalog(session)

    assert result["seeded"] is False
    assert await CategoryRepository(session).count() == 5
    _, total = await ProductRepository(session).search(ProductSearchCriteria())
    assert total == 20


@pytest.mark.asyncio
async def test_seed_skipped_when_categories_exist(
    session: AsyncSession, make_category
) -> None:
    """Any existing category, even inactive, blocks seeding."""
    await make_category("Archived", None, is_active=False)

    result = await seed_catalog(session)

    assert result["seeded"] is False
    assert await CategoryRepository(session).count() == 1


@pytest.mark.asyncio
async def test_seeded_products_searchable(session: AsyncSession) -> None:
    """Seeded products carry their literal prices."""
    await seed_catalog(session)

    rows, total = await ProductRepository(session).search(
        ProductSearchCriteria(search_term="gaming")
    )

    assert total == 1
    product, category_name = rows[0]
    assert product.name == "Gaming Monitor"
    assert product.price == Decimal("449.99")
    assert category_name == "Electronics"
