"""Category API endpoints.

Provides CRUD endpoints for categories. Deletion is a soft delete and is
refused while active products still reference the category.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from product_catalog.api.schemas import CategoryRequest, CategoryResponse, ErrorResponse
from product_catalog.application.category_service import CategoryDetails, CategoryService
from product_catalog.application.validation import CategoryInput
from product_catalog.catalog.models import INTEGER_MAX
from product_catalog.catalog.repository import CategoryRepository
from product_catalog.infrastructure.database import get_session

router = APIRouter(prefix="/api/categories", tags=["Categories"])

CategoryId = Annotated[int, Path(ge=1, le=INTEGER_MAX, description="Category identifier")]


# ============================================================================
# Dependencies
# ============================================================================


def get_category_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CategoryService:
    """Build a category service bound to the request session."""
    return CategoryService(CategoryRepository(session))


# ============================================================================
# Converters
# ============================================================================


def category_to_response(category: CategoryDetails) -> CategoryResponse:
    """Convert CategoryDetails to response schema."""
    return CategoryResponse(
        id=category.id,
        name=category.name,
        description=category.description,
        is_active=category.is_active,
        product_count=category.product_count,
    )


def request_to_input(body: CategoryRequest) -> CategoryInput:
    """Convert request body to service input."""
    return CategoryInput(name=body.name, description=body.description)


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=list[CategoryResponse],
    summary="List categories",
    description="Get all active categories ordered by name.",
)
async def list_categories(
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> list[CategoryResponse]:
    """List active categories with their product counts."""
    categories = await service.list_active()
    return [category_to_response(c) for c in categories]


@router.get(
    "/{category_id}",
    response_model=CategoryResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get category",
)
async def get_category(
    category_id: CategoryId,
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> CategoryResponse:
    """Get an active category by ID.

    Raises:
        CategoryNotFoundError: If the category is missing or inactive.
    """
    category = await service.get_by_id(category_id)
    return category_to_response(category)


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create category",
)
async def create_category(
    body: CategoryRequest,
    request: Request,
    response: Response,
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> CategoryResponse:
    """Create a new category.

    Sets the Location header to the new category's URL.
    """
    category = await service.create(request_to_input(body))
    response.headers["Location"] = str(
        request.url_for("get_category", category_id=category.id)
    )
    return category_to_response(category)


@router.put(
    "/{category_id}",
    response_model=CategoryResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Update category",
)
async def update_category(
    category_id: CategoryId,
    body: CategoryRequest,
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> CategoryResponse:
    """Replace the name and description of an active category."""
    category = await service.update(category_id, request_to_input(body))
    return category_to_response(category)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Delete category",
    description="Soft-delete a category that has no active products.",
)
async def delete_category(
    category_id: CategoryId,
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> None:
    """Soft-delete a category.

    Raises:
        CategoryNotFoundError: If missing or already inactive.
        CategoryHasActiveProductsError: If active products reference it.
    """
    await service.soft_delete(category_id)
