"""Product Catalog store.

Provides the ORM models, repositories, search predicate composition and
seed data for categories and products.
"""

from product_catalog.catalog.models import Category, Product
from product_catalog.catalog.repository import CategoryRepository, ProductRepository
from product_catalog.catalog.search import (
    PaginatedResult,
    ProductSearchCriteria,
    SortField,
    SortOrder,
)
from product_catalog.catalog.seeder import seed_catalog

__all__ = [
    # Models
    "Category",
    "Product",
    # Repository
    "CategoryRepository",
    "ProductRepository",
    # Search
    "PaginatedResult",
    "ProductSearchCriteria",
    "SortField",
    "SortOrder",
    # Seeding
    "seed_catalog",
]
