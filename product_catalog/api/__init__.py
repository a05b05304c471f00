"""API layer module.

Contains FastAPI routers, middleware and request/response schemas.
"""

from product_catalog.api.categories import router as categories_router
from product_catalog.api.health import router as health_router
from product_catalog.api.products import router as products_router

__all__ = [
    "categories_router",
    "health_router",
    "products_router",
]
