"""Product search criteria and predicate composition.

Turns a search request into SQLAlchemy filter conditions and an ORDER BY
clause. Conditions are composed in a fixed order:

1. active products only
2. every search token must appear in the name or the description
3. exact category
4. inclusive price bounds
5. in-stock filter (only when ``in_stock`` is true)

Counting and pagination are done by the repository.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, and_, or_

from product_catalog.catalog.models import Product

T = TypeVar("T")

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


class SortField(str, Enum):
    """Sortable product fields."""

    NAME = "name"
    PRICE = "price"
    CREATED = "created"

    @classmethod
    def resolve(cls, value: str | None) -> "SortField":
        """Match a sort field case-insensitively, falling back to name."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.NAME


class SortOrder(str, Enum):
    """Sort directions."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def resolve(cls, value: str | None) -> "SortOrder":
        """Anything other than "desc" sorts ascending."""
        if (value or "").strip().lower() == cls.DESC.value:
            return cls.DESC
        return cls.ASC


@dataclass
class ProductSearchCriteria:
    """Search parameters for products.

    Page number and page size are clamped to a minimum of 1. Page size is
    also capped at MAX_PAGE_SIZE.

    Attributes:
        search_term: Whitespace-separated words, all of which must match.
        category_id: Filter by exact category ID.
        min_price: Inclusive lower price bound.
        max_price: Inclusive upper price bound.
        in_stock: When true, only products with stock. False means no filter.
        sort_by: Sort field (name, price, created).
        sort_order: Sort order (asc, desc).
        page_number: Page number (1-indexed).
        page_size: Items per page.
    """

    search_term: str | None = None
    category_id: int | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    in_stock: bool | None = None
    sort_by: str = SortField.NAME.value
    sort_order: str = SortOrder.ASC.value
    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        self.page_number = max(self.page_number, 1)
        self.page_size = min(max(self.page_size, 1), MAX_PAGE_SIZE)

    @property
    def search_tokens(self) -> list[str]:
        """Non-empty words of the search term."""
        if not self.search_term:
            return []
        return self.search_term.split()

    @property
    def offset(self) -> int:
        """Calculate offset from page number."""
        return (self.page_number - 1) * self.page_size

    @property
    def limit(self) -> int:
        """Get limit (alias for page_size)."""
        return self.page_size


@dataclass
class PaginatedResult(Generic[T]):
    """Paginated result container.

    Attributes:
        items: Items on the current page.
        total_count: Number of matches before pagination.
        page_number: Current page.
        page_size: Items per page.
    """

    items: list[T]
    total_count: int
    page_number: int
    page_size: int

    @property
    def total_pages(self) -> int:
        """Calculate total pages."""
        return (self.total_count + self.page_size - 1) // self.page_size


def _contains_ignore_case(column: Any, token: str) -> ColumnElement[bool]:
    return column.icontains(token, autoescape=True)


def build_search_conditions(criteria: ProductSearchCriteria) -> list[ColumnElement[bool]]:
    """Build the WHERE conditions for a product search.

    Args:
        criteria: Search parameters.

    Returns:
        Conditions to be combined with AND.
    """
    conditions: list[ColumnElement[bool]] = [Product.is_active.is_(True)]

    for token in criteria.search_tokens:
        conditions.append(
            or_(
                _contains_ignore_case(Product.name, token),
                and_(
                    Product.description.is_not(None),
                    _contains_ignore_case(Product.description, token),
                ),
            )
        )

    if criteria.category_id is not None:
        conditions.append(Product.category_id == criteria.category_id)

    if criteria.min_price is not None:
        conditions.append(Product.price >= criteria.min_price)

    if criteria.max_price is not None:
        conditions.append(Product.price <= criteria.max_price)

    # in_stock=False applies no stock filter
    if criteria.in_stock:
        conditions.append(Product.stock_quantity > 0)

    return conditions


def build_sort_clause(criteria: ProductSearchCriteria) -> Any:
    """Get the ORDER BY clause for a product search.

    Args:
        criteria: Search parameters.

    Returns:
        SQLAlchemy ordering expression.
    """
    columns = {
        SortField.NAME: Product.name,
        SortField.PRICE: Product.price,
        SortField.CREATED: Product.created_date,
    }
    column = columns[SortField.resolve(criteria.sort_by)]
    if SortOrder.resolve(criteria.sort_order) is SortOrder.DESC:
        return column.desc()
    return column.asc()
