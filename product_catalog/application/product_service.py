"""Product application service.

Handles product CRUD against active categories, soft deletion, and the
filtered/sorted/paginated product search.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal

import structlog

from product_catalog.application.validation import ProductInput, validate_product_input
from product_catalog.catalog.models import Product
from product_catalog.catalog.repository import CategoryRepository, ProductRepository
from product_catalog.catalog.search import PaginatedResult, ProductSearchCriteria
from product_catalog.domain.exceptions import CategoryNotFoundError, ProductNotFoundError

logger = structlog.get_logger()


@dataclass(frozen=True)
class ProductDetails:
    """Product as returned to callers, with its category name."""

    id: int
    name: str
    description: str | None
    price: Decimal
    category_id: int
    category_name: str
    stock_quantity: int
    created_date: datetime
    is_active: bool


def to_product_details(product: Product, category_name: str) -> ProductDetails:
    """Convert a Product row and its category name."""
    return ProductDetails(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        category_id=product.category_id,
        category_name=category_name,
        stock_quantity=product.stock_quantity,
        created_date=product.created_date,
        is_active=product.is_active,
    )


class ProductService:
    """Service for product operations.

    Example usage:
        async with async_session_factory() as session:
            service = ProductService(
                ProductRepository(session),
                CategoryRepository(session),
            )
            page = await service.search(
                ProductSearchCriteria(search_term="wireless", sort_by="price"),
            )
    """

    def __init__(
        self,
        products: ProductRepository,
        categories: CategoryRepository,
    ) -> None:
        """Initialize service.

        Args:
            products: Product repository.
            categories: Category repository, used for reference checks.
        """
        self.products = products
        self.categories = categories

    async def list_active(self) -> list[ProductDetails]:
        """List active products ordered by name."""
        rows = await self.products.list_active()
        return [to_product_details(product, name) for product, name in rows]

    async def get_by_id(
        self,
        product_id: int,
        include_inactive: bool = False,
    ) -> ProductDetails:
        """Get a product with its category name.

        Args:
            product_id: Product ID.
            include_inactive: Bypass the active filter.

        Returns:
            Product details.

        Raises:
            ProductNotFoundError: If missing (or inactive, unless bypassed).
        """
        row = await self.products.get_with_category_name(product_id, include_inactive)
        if row is None:
            raise ProductNotFoundError(product_id)

        product, category_name = row
        return to_product_details(product, category_name)

    async def _require_active_category(self, category_id: int) -> None:
        if not await self.categories.exists_active(category_id):
            logger.warning("Unknown or inactive category referenced", category_id=category_id)
            raise CategoryNotFoundError(category_id)

    async def create(self, data: ProductInput) -> ProductDetails:
        """Create a new active product.

        Args:
            data: Product fields. ``is_active`` is ignored.

        Returns:
            Created product.

        Raises:
            InputValidationError: If a field is invalid.
            CategoryNotFoundError: If the category is missing or inactive.
        """
        validate_product_input(data)
        await self._require_active_category(data.category_id)

        product = Product(
            name=data.name,
            description=data.description,
            price=data.price,
            category_id=data.category_id,
            stock_quantity=data.stock_quantity,
            created_date=datetime.now(timezone.utc),
            is_active=True,
        )
        await self.products.save(product)
        await self.products.commit()

        logger.info(
            "Product created",
            product_id=product.id,
            category_id=product.category_id,
        )
        return await self.get_by_id(product.id)

    async def update(self, product_id: int, data: ProductInput) -> ProductDetails:
        """Replace all mutable fields of an active product.

        Args:
            product_id: Product ID.
            data: New product fields, including ``is_active``.

        Returns:
            Updated product.

        Raises:
            InputValidationError: If a field is invalid.
            ProductNotFoundError: If the product is missing or inactive.
            CategoryNotFoundError: If the category is missing or inactive.
        """
        validate_product_input(data)

        product = await self.products.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        await self._require_active_category(data.category_id)

        product.name = data.name
        product.description = data.description
        product.price = data.price
        product.category_id = data.category_id
        product.stock_quantity = data.stock_quantity
        product.is_active = data.is_active
        await self.products.save(product)
        await self.products.commit()

        logger.info(
            "Product updated",
            product_id=product_id,
            is_active=product.is_active,
        )
        return await self.get_by_id(product_id, include_inactive=True)

    async def soft_delete(self, product_id: int) -> None:
        """Mark a product inactive.

        Args:
            product_id: Product ID.

        Raises:
            ProductNotFoundError: If missing or already inactive.
        """
        product = await self.products.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        product.is_active = False
        await self.products.save(product)
        await self.products.commit()

        logger.info("Product soft-deleted", product_id=product_id)

    async def search(
        self,
        criteria: ProductSearchCriteria,
    ) -> PaginatedResult[ProductDetails]:
        """Search active products with filters and pagination.

        Args:
            criteria: Search parameters.

        Returns:
            Paginated product results.
        """
        rows, total = await self.products.search(criteria)

        logger.debug(
            "Product search",
            search_term=criteria.search_term,
            total_count=total,
            page_number=criteria.page_number,
        )
        return PaginatedResult(
            items=[to_product_details(product, name) for product, name in rows],
            total_count=total,
            page_number=criteria.page_number,
            page_size=criteria.page_size,
        )
