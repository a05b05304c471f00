"""Input validation for catalog commands.

Each validator checks fields in declaration order and raises
InputValidationError for the first violated constraint.
"""

from dataclasses import dataclass
from decimal import Decimal

from product_catalog.catalog.models import (
    CATEGORY_DESCRIPTION_MAX_LENGTH,
    CATEGORY_NAME_MAX_LENGTH,
    INTEGER_MAX,
    PRICE_MAX,
    PRODUCT_DESCRIPTION_MAX_LENGTH,
    PRODUCT_NAME_MAX_LENGTH,
)
from product_catalog.domain.exceptions import InputValidationError

PRICE_DECIMAL_PLACES = 2


@dataclass(frozen=True)
class CategoryInput:
    """Fields accepted when creating or updating a category."""

    name: str
    description: str | None = None


@dataclass(frozen=True)
class ProductInput:
    """Fields accepted when creating or updating a product.

    ``is_active`` is ignored on create; new products are always active.
    """

    name: str
    price: Decimal
    category_id: int
    stock_quantity: int
    description: str | None = None
    is_active: bool = True


def _require_text(field: str, value: str | None, max_length: int) -> None:
    if value is None or not value.strip():
        raise InputValidationError(field, f"{field} is required")
    _check_length(field, value, max_length)


def _check_length(field: str, value: str | None, max_length: int) -> None:
    if value is not None and len(value) > max_length:
        raise InputValidationError(
            field, f"{field} cannot exceed {max_length} characters"
        )


def validate_category_input(data: CategoryInput) -> None:
    """Validate category fields.

    Args:
        data: Category fields to check.

    Raises:
        InputValidationError: On the first violated constraint.
    """
    _require_text("name", data.name, CATEGORY_NAME_MAX_LENGTH)
    _check_length("description", data.description, CATEGORY_DESCRIPTION_MAX_LENGTH)


def validate_product_input(data: ProductInput) -> None:
    """Validate product fields.

    Args:
        data: Product fields to check.

    Raises:
        InputValidationError: On the first violated constraint.
    """
    _require_text("name", data.name, PRODUCT_NAME_MAX_LENGTH)
    _check_length("description", data.description, PRODUCT_DESCRIPTION_MAX_LENGTH)

    if not data.price.is_finite():
        raise InputValidationError("price", "price must be a finite number")
    if data.price < 0:
        raise InputValidationError("price", "price must be non-negative")
    if data.price > PRICE_MAX:
        raise InputValidationError("price", f"price cannot exceed {PRICE_MAX}")
    exponent = data.price.normalize().as_tuple().exponent
    if isinstance(exponent, int) and exponent < -PRICE_DECIMAL_PLACES:
        raise InputValidationError(
            "price",
            f"price cannot have more than {PRICE_DECIMAL_PLACES} decimal places",
        )

    if not 1 <= data.category_id <= INTEGER_MAX:
        raise InputValidationError("category_id", "a valid category_id is required")

    if not 0 <= data.stock_quantity <= INTEGER_MAX:
        raise InputValidationError(
            "stock_quantity",
            f"stock_quantity must be between 0 and {INTEGER_MAX}",
        )
