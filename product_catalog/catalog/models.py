"""SQLAlchemy models for the product catalog.

Defines Category and Product tables for persistent storage. Both carry an
``is_active`` soft-delete flag; rows are never physically removed by the
service.
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from product_catalog.infrastructure.database import Base

CATEGORY_NAME_MAX_LENGTH = 50
CATEGORY_DESCRIPTION_MAX_LENGTH = 200
PRODUCT_NAME_MAX_LENGTH = 100
PRODUCT_DESCRIPTION_MAX_LENGTH = 500

# Largest values the INTEGER and NUMERIC(18, 2) columns hold
INTEGER_MAX = 2**31 - 1
PRICE_MAX = Decimal("9999999999999999.99")


class Category(Base):
    """Product category.

    Attributes:
        id: Store-assigned identifier.
        name: Category name.
        description: Optional description.
        is_active: Soft-delete flag.
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(CATEGORY_NAME_MAX_LENGTH), nullable=False)
    description: Mapped[str | None] = mapped_column(
        String(CATEGORY_DESCRIPTION_MAX_LENGTH), nullable=True
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Category(id={self.id}, name={self.name}, is_active={self.is_active})>"


class Product(Base):
    """Product entity in the catalog.

    Attributes:
        id: Store-assigned identifier.
        name: Product name.
        description: Optional description.
        price: Unit price with two decimal places.
        category_id: Owning category. Deleting a referenced category row
            is restricted at the database level.
        stock_quantity: Units available.
        created_date: Creation timestamp, never updated.
        is_active: Soft-delete flag.
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(PRODUCT_NAME_MAX_LENGTH), nullable=False)
    description: Mapped[str | None] = mapped_column(
        String(PRODUCT_DESCRIPTION_MAX_LENGTH), nullable=True
    )
    price: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
    )
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True
    )

    # Indexes backing the search predicates and sort orders
    __table_args__ = (
        Index("ix_products_category_id_is_active", "category_id", "is_active"),
        Index("ix_products_is_active_name", "is_active", "name"),
        Index("ix_products_is_active_price", "is_active", "price"),
        Index("ix_products_is_active_created_date", "is_active", "created_date"),
        Index("ix_products_is_active_stock_quantity", "is_active", "stock_quantity"),
        Index("ix_products_category_id_is_active_price", "category_id", "is_active", "price"),
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, name={self.name[:30]}, is_active={self.is_active})>"
