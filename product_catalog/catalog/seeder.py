"""Initial catalog data.

Seeds five categories and twenty products into an empty database.
Seeding is skipped when any category row already exists.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from product_catalog.catalog.models import Category, Product
from product_catalog.catalog.repository import CategoryRepository, ProductRepository

logger = structlog.get_logger()

# (name, description)
SEED_CATEGORIES: list[tuple[str, str]] = [
    ("Electronics", "Electronic devices and gadgets"),
    ("Clothing", "Apparel and fashion items"),
    ("Books", "Books and educational materials"),
    ("Home & Garden", "Home improvement and gardening items"),
    ("Sports", "Sports and fitness equipment"),
]

# category name -> (name, description, price, stock_quantity)
SEED_PRODUCTS: dict[str, list[tuple[str, str, str, int]]] = {
    "Electronics": [
        ("Laptop", "High-performance laptop computer", "999.99", 50),
        ("Smartphone", "Latest model smartphone", "699.99", 100),
        ("Wireless Earbuds", "Premium wireless earbuds", "149.99", 200),
        ("Gaming Monitor", "27-inch 4K gaming monitor", "449.99", 30),
        ("Wireless Mouse", "Ergonomic wireless mouse", "29.99", 150),
    ],
    "Clothing": [
        ("T-Shirt", "Cotton t-shirt", "19.99", 500),
        ("Jeans", "Denim jeans", "59.99", 150),
        ("Sneakers", "Running sneakers", "89.99", 75),
        ("Winter Jacket", "Insulated winter jacket", "129.99", 35),
    ],
    "Books": [
        ("Programming Book", "Learn programming fundamentals", "39.99", 80),
        ("Science Fiction Novel", "Bestselling sci-fi novel", "14.99", 120),
        ("Cookbook", "Healthy cooking recipes", "24.99", 60),
        ("Mystery Novel", "Gripping mystery thriller", "18.99", 95),
    ],
    "Home & Garden": [
        ("Coffee Maker", "Automatic drip coffee maker", "79.99", 40),
        ("Garden Tools Set", "Complete gardening tool kit", "49.99", 25),
        ("Throw Pillow", "Decorative throw pillow", "12.99", 200),
        ("LED Desk Lamp", "Adjustable LED desk lamp", "34.99", 65),
    ],
    "Sports": [
        ("Yoga Mat", "Non-slip yoga mat", "29.99", 100),
        ("Dumbbells", "Adjustable dumbbells set", "199.99", 20),
        ("Basketball", "Official size basketball", "34.99", 50),
    ],
}


async def seed_catalog(session: AsyncSession) -> dict[str, Any]:
    """Seed categories and products if the catalog is empty.

    Args:
        session: Async SQLAlchemy session.

    Returns:
        Seeding result with counts.
    """
    categories = CategoryRepository(session)
    products = ProductRepository(session)

    existing = await categories.count()
    if existing:
        logger.info("Catalog already seeded", category_count=existing)
        return {"seeded": False, "categories_created": 0, "products_created": 0}

    created_categories = await categories.save_all(
        [
            Category(name=name, description=description, is_active=True)
            for name, description in SEED_CATEGORIES
        ]
    )
    category_ids = {category.name: category.id for category in created_categories}

    now = datetime.now(timezone.utc)
    created_products = await products.save_all(
        [
            Product(
                name=name,
                description=description,
                price=Decimal(price),
                category_id=category_ids[category_name],
                stock_quantity=stock,
                created_date=now,
                is_active=True,
            )
            for category_name, items in SEED_PRODUCTS.items()
            for name, description, price, stock in items
        ]
    )
    await session.commit()

    logger.info(
        "Catalog seeded",
        categories_created=len(created_categories),
        products_created=len(created_products),
    )
    return {
        "seeded": True,
        "categories_created": len(created_categories),
        "products_created": len(created_products),
    }
