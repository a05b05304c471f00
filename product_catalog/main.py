"""Product Catalog main application module.

This module initializes the FastAPI application and configures
core middleware, routers, exception handlers and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from product_catalog.api.categories import router as categories_router
from product_catalog.api.health import router as health_router
from product_catalog.api.middleware import error_content, setup_middleware
from product_catalog.api.products import router as products_router
from product_catalog.api.schemas import ErrorDetail
from product_catalog.catalog.seeder import seed_catalog
from product_catalog.domain.exceptions import (
    DomainError,
    InputValidationError,
    NotFoundError,
)
from product_catalog.infrastructure.config import settings
from product_catalog.infrastructure.database import (
    async_session_factory,
    create_tables,
    engine,
)
from product_catalog.infrastructure.logging import configure_logging

configure_logging(settings.log_level)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    # Startup
    logger.info(
        "Starting Product Catalog API",
        version=settings.api_version,
        debug=settings.debug,
    )

    if settings.create_tables_on_startup:
        await create_tables()

    if settings.seed_on_startup:
        async with async_session_factory() as session:
            result = await seed_catalog(session)
        logger.info("Seed check complete", **result)

    yield

    # Shutdown
    logger.info("Shutting down Product Catalog API")
    await engine.dispose()


app = FastAPI(
    title="Product Catalog API",
    description="Categories and products with soft delete and product search",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup custom middleware (request ID, error handling)
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(categories_router)
app.include_router(products_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Map domain errors to 404 (not found) or 400 (everything else)."""
    if isinstance(exc, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    else:
        status_code = status.HTTP_400_BAD_REQUEST

    details = []
    if isinstance(exc, InputValidationError):
        details.append(ErrorDetail(field=exc.field, message=exc.message))

    logger.info(
        "Request rejected",
        error_code=exc.error_code,
        status_code=status_code,
        **exc.details,
    )
    return JSONResponse(
        status_code=status_code,
        content=error_content(request, exc.error_code, exc.message, details),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed requests as 400 with one detail per problem."""
    details = [
        ErrorDetail(
            field=".".join(str(part) for part in error["loc"][1:]) or None,
            message=error["msg"],
        )
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_content(request, "VALIDATION_ERROR", "Invalid request", details),
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle HTTP exceptions with consistent format."""
    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
    else:
        error_code = "ERROR"
        message = str(detail)

    return JSONResponse(
        status_code=exc.status_code,
        content=error_content(request, error_code, message),
        headers=getattr(exc, "headers", None),
    )
