"""Category application service.

Handles listing, creation, update and soft deletion of categories,
including the guard that keeps a category alive while active products
still reference it.
"""

from dataclasses import dataclass

import structlog

from product_catalog.application.validation import CategoryInput, validate_category_input
from product_catalog.catalog.models import Category
from product_catalog.catalog.repository import CategoryRepository
from product_catalog.domain.exceptions import (
    CategoryHasActiveProductsError,
    CategoryNotFoundError,
)

logger = structlog.get_logger()


@dataclass(frozen=True)
class CategoryDetails:
    """Category as returned to callers."""

    id: int
    name: str
    description: str | None
    is_active: bool
    product_count: int


def to_category_details(category: Category, product_count: int) -> CategoryDetails:
    """Convert a Category row and its active product count."""
    return CategoryDetails(
        id=category.id,
        name=category.name,
        description=category.description,
        is_active=category.is_active,
        product_count=product_count,
    )


class CategoryService:
    """Service for category operations.

    Example usage:
        async with async_session_factory() as session:
            service = CategoryService(CategoryRepository(session))
            categories = await service.list_active()
    """

    def __init__(self, categories: CategoryRepository) -> None:
        """Initialize service.

        Args:
            categories: Category repository.
        """
        self.categories = categories

    async def list_active(self) -> list[CategoryDetails]:
        """List active categories ordered by name.

        Returns:
            Categories with their active product counts.
        """
        rows = await self.categories.list_active()
        return [to_category_details(category, count) for category, count in rows]

    async def get_by_id(
        self,
        category_id: int,
        include_inactive: bool = False,
    ) -> CategoryDetails:
        """Get a category by ID, honouring the active filter by default.

        Args:
            category_id: Category ID.
            include_inactive: Bypass the active filter.

        Returns:
            Category details.

        Raises:
            CategoryNotFoundError: If missing or inactive.
        """
        category = await self.categories.get_by_id(category_id, include_inactive)
        if category is None:
            raise CategoryNotFoundError(category_id)

        count = await self.categories.count_active_products(category_id)
        return to_category_details(category, count)

    async def create(self, data: CategoryInput) -> CategoryDetails:
        """Create a new active category.

        Args:
            data: Category fields.

        Returns:
            Created category.

        Raises:
            InputValidationError: If a field is invalid.
        """
        validate_category_input(data)

        category = Category(
            name=data.name,
            description=data.description,
            is_active=True,
        )
        await self.categories.save(category)
        await self.categories.commit()

        logger.info("Category created", category_id=category.id, name=category.name)
        return to_category_details(category, 0)

    async def update(self, category_id: int, data: CategoryInput) -> CategoryDetails:
        """Replace the name and description of an active category.

        Args:
            category_id: Category ID.
            data: New category fields.

        Returns:
            Updated category.

        Raises:
            InputValidationError: If a field is invalid.
            CategoryNotFoundError: If missing or inactive.
        """
        validate_category_input(data)

        category = await self.categories.get_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)

        category.name = data.name
        category.description = data.description
        await self.categories.save(category)
        await self.categories.commit()

        logger.info("Category updated", category_id=category_id)
        count = await self.categories.count_active_products(category_id)
        return to_category_details(category, count)

    async def soft_delete(self, category_id: int) -> None:
        """Mark a category inactive.

        Args:
            category_id: Category ID.

        Raises:
            CategoryNotFoundError: If missing or already inactive.
            CategoryHasActiveProductsError: If active products reference it.
        """
        category = await self.categories.get_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)

        if await self.categories.has_active_products(category_id):
            logger.warning(
                "Category delete rejected, active products remain",
                category_id=category_id,
            )
            raise CategoryHasActiveProductsError(category_id, category.name)

        category.is_active = False
        await self.categories.save(category)
        await self.categories.commit()

        logger.info("Category soft-deleted", category_id=category_id)
