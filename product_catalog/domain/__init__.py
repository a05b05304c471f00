"""Domain layer.

Contains the error taxonomy shared by the catalog services and the API.
"""

from product_catalog.domain.exceptions import (
    CategoryHasActiveProductsError,
    CategoryNotFoundError,
    DomainError,
    InputValidationError,
    InvalidStateError,
    NotFoundError,
    ProductNotFoundError,
)

__all__ = [
    "DomainError",
    # Not found
    "NotFoundError",
    "CategoryNotFoundError",
    "ProductNotFoundError",
    # Validation
    "InputValidationError",
    # State
    "InvalidStateError",
    "CategoryHasActiveProductsError",
]
