"""Category and product repositories for database operations.

Reads that need the category name or an active product count use explicit
joins rather than relationship loading.
"""

from sqlalchemy import Select, exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from product_catalog.catalog.models import Category, Product
from product_catalog.catalog.search import (
    ProductSearchCriteria,
    build_search_conditions,
    build_sort_clause,
)


class _Repository:
    """Shared session handling for repositories."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def commit(self) -> None:
        """Commit the current unit of work."""
        await self.session.commit()


class CategoryRepository(_Repository):
    """Repository for Category database operations.

    Example usage:
        async with async_session_factory() as session:
            repo = CategoryRepository(session)
            rows = await repo.list_active()
    """

    async def save(self, category: Category) -> Category:
        """Save a category to database.

        Args:
            category: Category to save.

        Returns:
            Saved category with its assigned ID.
        """
        self.session.add(category)
        await self.session.flush()
        return category

    async def save_all(self, categories: list[Category]) -> list[Category]:
        """Save multiple categories to database."""
        self.session.add_all(categories)
        await self.session.flush()
        return categories

    async def get_by_id(
        self,
        category_id: int,
        include_inactive: bool = False,
    ) -> Category | None:
        """Get category by ID.

        Args:
            category_id: Category ID.
            include_inactive: Bypass the active filter.

        Returns:
            Category if found, None otherwise.
        """
        query = select(Category).where(Category.id == category_id)
        if not include_inactive:
            query = query.where(Category.is_active.is_(True))

        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def list_active(self) -> list[tuple[Category, int]]:
        """List active categories with their active product counts.

        Returns:
            (category, product_count) pairs ordered by name.
        """
        product_counts = (
            select(
                Product.category_id,
                func.count(Product.id).label("product_count"),
            )
            .where(Product.is_active.is_(True))
            .group_by(Product.category_id)
            .subquery()
        )
        query = (
            select(Category, func.coalesce(product_counts.c.product_count, 0))
            .outerjoin(product_counts, product_counts.c.category_id == Category.id)
            .where(Category.is_active.is_(True))
            .order_by(Category.name.asc())
        )

        result = await self.session.execute(query)
        return [(row[0], row[1]) for row in result.all()]

    async def exists_active(self, category_id: int) -> bool:
        """Check whether an active category with this ID exists."""
        query = select(
            exists().where(
                Category.id == category_id,
                Category.is_active.is_(True),
            )
        )
        result = await self.session.execute(query)
        return bool(result.scalar())

    async def count_active_products(self, category_id: int) -> int:
        """Count active products referencing a category."""
        query = select(func.count(Product.id)).where(
            Product.category_id == category_id,
            Product.is_active.is_(True),
        )
        result = await self.session.execute(query)
        return result.scalar_one()

    async def has_active_products(self, category_id: int) -> bool:
        """Check whether any active product references a category."""
        query = select(
            exists().where(
                Product.category_id == category_id,
                Product.is_active.is_(True),
            )
        )
        result = await self.session.execute(query)
        return bool(result.scalar())

    async def count(self) -> int:
        """Count all categories, active or not."""
        result = await self.session.execute(select(func.count(Category.id)))
        return result.scalar_one()


class ProductRepository(_Repository):
    """Repository for Product database operations.

    Handles all database interactions for products including
    filtering, sorting, and pagination. Read methods return
    (product, category_name) pairs.

    Example usage:
        async with async_session_factory() as session:
            repo = ProductRepository(session)
            rows, total = await repo.search(
                ProductSearchCriteria(search_term="gaming", in_stock=True),
            )
    """

    def _with_category_name(self) -> Select[tuple[Product, str]]:
        return select(Product, Category.name).join(
            Category, Product.category_id == Category.id
        )

    async def save(self, product: Product) -> Product:
        """Save a product to database.

        Args:
            product: Product to save.

        Returns:
            Saved product with its assigned ID.
        """
        self.session.add(product)
        await self.session.flush()
        return product

    async def save_all(self, products: list[Product]) -> list[Product]:
        """Save multiple products to database."""
        self.session.add_all(products)
        await self.session.flush()
        return products

    async def get_by_id(
        self,
        product_id: int,
        include_inactive: bool = False,
    ) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID.
            include_inactive: Bypass the active filter.

        Returns:
            Product if found, None otherwise.
        """
        query = select(Product).where(Product.id == product_id)
        if not include_inactive:
            query = query.where(Product.is_active.is_(True))

        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_with_category_name(
        self,
        product_id: int,
        include_inactive: bool = False,
    ) -> tuple[Product, str] | None:
        """Get product by ID together with its category name.

        Args:
            product_id: Product ID.
            include_inactive: Bypass the active filter.

        Returns:
            (product, category_name) if found, None otherwise.
        """
        query = self._with_category_name().where(Product.id == product_id)
        if not include_inactive:
            query = query.where(Product.is_active.is_(True))

        result = await self.session.execute(query)
        row = result.one_or_none()
        if row is None:
            return None
        return row[0], row[1]

    async def list_active(self) -> list[tuple[Product, str]]:
        """List active products ordered by name.

        Returns:
            (product, category_name) pairs.
        """
        query = (
            self._with_category_name()
            .where(Product.is_active.is_(True))
            .order_by(Product.name.asc())
        )
        result = await self.session.execute(query)
        return [(row[0], row[1]) for row in result.all()]

    async def search(
        self,
        criteria: ProductSearchCriteria,
    ) -> tuple[list[tuple[Product, str]], int]:
        """Find products with filtering, sorting, and pagination.

        Args:
            criteria: Search parameters.

        Returns:
            The requested page of (product, category_name) pairs and the
            total number of matches before pagination.
        """
        conditions = build_search_conditions(criteria)

        # Total count before pagination
        count_query = select(func.count(Product.id)).where(*conditions)
        total = (await self.session.execute(count_query)).scalar_one()

        query = (
            self._with_category_name()
            .where(*conditions)
            .order_by(build_sort_clause(criteria))
            .offset(criteria.offset)
            .limit(criteria.limit)
        )
        result = await self.session.execute(query)
        rows = result.all()
        return [(row[0], row[1]) for row in rows], total
