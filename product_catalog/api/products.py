"""Product API endpoints.

Provides CRUD endpoints for products and the product search endpoint.
Only active products are visible through reads and search.
"""

from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from product_catalog.api.schemas import (
    CreateProductRequest,
    ErrorResponse,
    ProductPageResponse,
    ProductResponse,
    UpdateProductRequest,
)
from product_catalog.application.product_service import ProductDetails, ProductService
from product_catalog.application.validation import ProductInput
from product_catalog.catalog.models import INTEGER_MAX, PRICE_MAX
from product_catalog.catalog.repository import CategoryRepository, ProductRepository
from product_catalog.catalog.search import (
    DEFAULT_PAGE_NUMBER,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    ProductSearchCriteria,
)
from product_catalog.infrastructure.database import get_session

router = APIRouter(prefix="/api/products", tags=["Products"])

ProductId = Annotated[int, Path(ge=1, le=INTEGER_MAX, description="Product identifier")]


# ============================================================================
# Dependencies
# ============================================================================


def get_product_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ProductService:
    """Build a product service bound to the request session."""
    return ProductService(ProductRepository(session), CategoryRepository(session))


# ============================================================================
# Converters
# ============================================================================


def product_to_response(product: ProductDetails) -> ProductResponse:
    """Convert ProductDetails to response schema."""
    return ProductResponse(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        category_id=product.category_id,
        category_name=product.category_name,
        stock_quantity=product.stock_quantity,
        created_date=product.created_date,
        is_active=product.is_active,
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=list[ProductResponse],
    summary="List products",
    description="Get all active products ordered by name.",
)
async def list_products(
    service: Annotated[ProductService, Depends(get_product_service)],
) -> list[ProductResponse]:
    """List active products with their category names."""
    products = await service.list_active()
    return [product_to_response(p) for p in products]


@router.get(
    "/search",
    response_model=ProductPageResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Search products",
)
async def search_products(
    service: Annotated[ProductService, Depends(get_product_service)],
    search_term: Annotated[
        str | None,
        Query(alias="searchTerm", description="Words that must all appear in name or description"),
    ] = None,
    category_id: Annotated[
        int | None,
        Query(alias="categoryId", ge=1, le=INTEGER_MAX, description="Filter by category"),
    ] = None,
    min_price: Annotated[
        Decimal | None,
        Query(alias="minPrice", ge=0, le=PRICE_MAX, description="Inclusive lower price bound"),
    ] = None,
    max_price: Annotated[
        Decimal | None,
        Query(alias="maxPrice", ge=0, le=PRICE_MAX, description="Inclusive upper price bound"),
    ] = None,
    in_stock: Annotated[
        bool | None, Query(alias="inStock", description="Only products with stock when true")
    ] = None,
    sort_by: Annotated[
        str, Query(alias="sortBy", description="name, price or created")
    ] = "name",
    sort_order: Annotated[
        str, Query(alias="sortOrder", description="asc or desc")
    ] = "asc",
    page_number: Annotated[
        int,
        Query(
            alias="pageNumber",
            le=INTEGER_MAX,
            description="Page number, values below 1 read as 1",
        ),
    ] = DEFAULT_PAGE_NUMBER,
    page_size: Annotated[
        int,
        Query(
            alias="pageSize",
            le=INTEGER_MAX,
            description=f"Items per page, clamped between 1 and {MAX_PAGE_SIZE}",
        ),
    ] = DEFAULT_PAGE_SIZE,
) -> ProductPageResponse:
    """Search active products.

    Filters combine with AND. Unknown sort fields fall back to name.

    Returns:
        One page of matching products and the total match count.
    """
    criteria = ProductSearchCriteria(
        search_term=search_term,
        category_id=category_id,
        min_price=min_price,
        max_price=max_price,
        in_stock=in_stock,
        sort_by=sort_by,
        sort_order=sort_order,
        page_number=page_number,
        page_size=page_size,
    )
    page = await service.search(criteria)

    return ProductPageResponse(
        items=[product_to_response(p) for p in page.items],
        total_count=page.total_count,
        page_number=page.page_number,
        page_size=page.page_size,
        total_pages=page.total_pages,
    )


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get product",
)
async def get_product(
    product_id: ProductId,
    service: Annotated[ProductService, Depends(get_product_service)],
) -> ProductResponse:
    """Get an active product by ID.

    Raises:
        ProductNotFoundError: If the product is missing or inactive.
    """
    product = await service.get_by_id(product_id)
    return product_to_response(product)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Create product",
)
async def create_product(
    body: CreateProductRequest,
    request: Request,
    response: Response,
    service: Annotated[ProductService, Depends(get_product_service)],
) -> ProductResponse:
    """Create a product in an active category.

    Sets the Location header to the new product's URL.

    Raises:
        InputValidationError: If a field is invalid.
        CategoryNotFoundError: If the category is missing or inactive.
    """
    product = await service.create(
        ProductInput(
            name=body.name,
            description=body.description,
            price=body.price,
            category_id=body.category_id,
            stock_quantity=body.stock_quantity,
        )
    )
    response.headers["Location"] = str(
        request.url_for("get_product", product_id=product.id)
    )
    return product_to_response(product)


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Update product",
)
async def update_product(
    product_id: ProductId,
    body: UpdateProductRequest,
    service: Annotated[ProductService, Depends(get_product_service)],
) -> ProductResponse:
    """Replace all mutable fields of an active product."""
    product = await service.update(
        product_id,
        ProductInput(
            name=body.name,
            description=body.description,
            price=body.price,
            category_id=body.category_id,
            stock_quantity=body.stock_quantity,
            is_active=body.is_active,
        ),
    )
    return product_to_response(product)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
    summary="Delete product",
    description="Soft-delete a product.",
)
async def delete_product(
    product_id: ProductId,
    service: Annotated[ProductService, Depends(get_product_service)],
) -> None:
    """Soft-delete a product.

    Raises:
        ProductNotFoundError: If missing or already inactive.
    """
    await service.soft_delete(product_id)
