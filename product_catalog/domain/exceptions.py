"""Domain exceptions.

All domain-level errors that represent business rule violations.
These exceptions are raised by the catalog services when a referenced
entity is missing, input is malformed, or an operation would break a
catalog invariant. The HTTP layer maps each family to a status code.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    error_code = "DOMAIN_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Not Found Errors
# ============================================================================


class NotFoundError(DomainError):
    """Raised when a referenced entity is absent or inactive."""

    error_code = "NOT_FOUND"


class CategoryNotFoundError(NotFoundError):
    """Raised when a category does not exist or has been soft-deleted."""

    error_code = "CATEGORY_NOT_FOUND"

    def __init__(self, category_id: int) -> None:
        super().__init__(
            f"Category with ID {category_id} was not found",
            details={"category_id": category_id},
        )


class ProductNotFoundError(NotFoundError):
    """Raised when a product does not exist or has been soft-deleted."""

    error_code = "PRODUCT_NOT_FOUND"

    def __init__(self, product_id: int) -> None:
        super().__init__(
            f"Product with ID {product_id} was not found",
            details={"product_id": product_id},
        )


# ============================================================================
# Validation Errors
# ============================================================================


class InputValidationError(DomainError):
    """Raised when input violates a field constraint.

    Only the first violated constraint is reported.
    """

    error_code = "VALIDATION_ERROR"

    def __init__(self, field: str, reason: str) -> None:
        """Initialize input validation error.

        Args:
            field: Name of the offending field.
            reason: Explanation of the violated constraint.
        """
        super().__init__(reason, details={"field": field})
        self.field = field


# ============================================================================
# State Errors
# ============================================================================


class InvalidStateError(DomainError):
    """Raised when an operation would violate a catalog invariant."""

    error_code = "INVALID_STATE"


class CategoryHasActiveProductsError(InvalidStateError):
    """Raised when soft-deleting a category still referenced by active products."""

    error_code = "CATEGORY_HAS_ACTIVE_PRODUCTS"

    def __init__(self, category_id: int, category_name: str) -> None:
        """Initialize category-in-use error.

        Args:
            category_id: ID of the category.
            category_name: Name of the category.
        """
        super().__init__(
            f"Cannot delete category '{category_name}' because it contains active products",
            details={"category_id": category_id, "category_name": category_name},
        )
