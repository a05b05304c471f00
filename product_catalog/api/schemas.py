"""API schemas for the Product Catalog API.

Pydantic models for request/response serialization. Catalog payloads use
camelCase field names on the wire; snake_case names are accepted on input
as well. Field constraints are enforced by the application validators,
not here.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Prices travel as JSON numbers
Price = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


# ============================================================================
# Common Schemas
# ============================================================================


class CamelModel(BaseModel):
    """Base model serialized with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Category Schemas
# ============================================================================


class CategoryRequest(CamelModel):
    """Request to create or update a category."""

    name: str = Field(..., description="Category name (max 50 characters)")
    description: str | None = Field(
        default=None, description="Optional description (max 200 characters)"
    )


class CategoryResponse(CamelModel):
    """A category with its active product count."""

    id: int = Field(..., description="Category identifier")
    name: str = Field(..., description="Category name")
    description: str | None = Field(default=None, description="Category description")
    is_active: bool = Field(..., description="False once soft-deleted")
    product_count: int = Field(..., description="Number of active products")


# ============================================================================
# Product Schemas
# ============================================================================


class CreateProductRequest(CamelModel):
    """Request to create a product."""

    name: str = Field(..., description="Product name (max 100 characters)")
    description: str | None = Field(
        default=None, description="Optional description (max 500 characters)"
    )
    price: Decimal = Field(..., description="Unit price, non-negative, two decimals")
    category_id: int = Field(..., description="ID of an active category")
    stock_quantity: int = Field(..., description="Units in stock, non-negative")


class UpdateProductRequest(CreateProductRequest):
    """Request to replace all mutable fields of a product."""

    is_active: bool = Field(default=True, description="Set to false to deactivate")


class ProductResponse(CamelModel):
    """A product with its category name."""

    id: int = Field(..., description="Product identifier")
    name: str = Field(..., description="Product name")
    description: str | None = Field(default=None, description="Product description")
    price: Price = Field(..., description="Unit price")
    category_id: int = Field(..., description="Category identifier")
    category_name: str = Field(..., description="Category name")
    stock_quantity: int = Field(..., description="Units in stock")
    created_date: datetime = Field(..., description="When the product was created")
    is_active: bool = Field(..., description="False once soft-deleted")


class ProductPageResponse(CamelModel):
    """One page of product search results."""

    items: list[ProductResponse] = Field(..., description="Products on this page")
    total_count: int = Field(..., description="Matches before pagination")
    page_number: int = Field(..., description="Current page number (1-based)")
    page_size: int = Field(..., description="Items per page")
    total_pages: int = Field(..., description="Number of pages")
