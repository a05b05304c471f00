"""Application layer.

Contains the category and product services that enforce catalog rules
on top of the repositories.
"""

from product_catalog.application.category_service import CategoryDetails, CategoryService
from product_catalog.application.product_service import ProductDetails, ProductService
from product_catalog.application.validation import CategoryInput, ProductInput

__all__ = [
    "CategoryDetails",
    "CategoryInput",
    "CategoryService",
    "ProductDetails",
    "ProductInput",
    "ProductService",
]
