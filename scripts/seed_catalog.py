#!/usr/bin/env python3
"""Seed product catalog script.

Creates the catalog tables if needed and inserts the initial categories
and products into an empty database. Running it against a database that
already holds categories changes nothing.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --skip-create-tables
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from product_catalog.catalog.seeder import seed_catalog
from product_catalog.infrastructure.config import settings
from product_catalog.infrastructure.database import (
    async_session_factory,
    create_tables,
    engine,
)
from product_catalog.infrastructure.logging import configure_logging


async def run_seed() -> dict:
    """Seed the catalog in a fresh session.

    Returns:
        Seeding result.
    """
    async with async_session_factory() as session:
        return await seed_catalog(session)


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the product catalog with initial categories and products",
    )
    parser.add_argument(
        "--skip-create-tables",
        action="store_true",
        help="Assume tables exist (e.g. created by migrations)",
    )

    args = parser.parse_args()
    configure_logging(settings.log_level)

    print("=" * 60)
    print("Product Catalog Seeder")
    print("=" * 60)

    if not args.skip_create_tables:
        print("Creating database tables...")
        await create_tables()
        print("Tables ready.")
        print()

    try:
        result = await run_seed()
    finally:
        await engine.dispose()

    if result["seeded"]:
        print(f"  ✓ Categories: {result['categories_created']}")
        print(f"  ✓ Products: {result['products_created']}")
    else:
        print("  - Catalog already contains categories, nothing to do")

    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
