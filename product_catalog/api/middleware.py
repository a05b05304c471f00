"""API middleware for the Product Catalog.

Provides:
- Request ID correlation and per-request access logging
- The single handler for unexpected errors (generic 500 body)
"""

import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from product_catalog.api.schemas import ErrorDetail, ErrorResponse

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


def error_content(
    request: Request,
    error_code: str,
    message: str,
    details: list[ErrorDetail] | None = None,
) -> dict:
    """Build the standard error body for a request."""
    return ErrorResponse(
        error_code=error_code,
        message=message,
        details=details or [],
        request_id=getattr(request.state, "request_id", None),
    ).model_dump()


def status_log_level(status_code: int) -> str:
    """Pick the log method for a response status."""
    if status_code >= 500:
        return "error"
    if status_code >= 400:
        return "warning"
    return "info"


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Correlate requests by ID and log each one when it finishes.

    The request ID is read from the X-Request-ID header or generated. Error
    bodies read it from request.state, and it is bound into the structlog
    context until the response goes out with the same header.

    The completion entry names the matched route template
    (``/api/products/{product_id}``) and its path parameters, so catalog IDs
    are searchable fields rather than parts of a URL. Search requests also
    log their query parameters. Client errors log as warnings and server
    errors as errors.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start_time = time.perf_counter()
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            self.log_completion(request, status_code, start_time)
            structlog.contextvars.unbind_contextvars("request_id")

        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    @staticmethod
    def log_completion(request: Request, status_code: int, start_time: float) -> None:
        # The router records the matched route on the shared scope
        route = request.scope.get("route")
        fields = {
            "method": request.method,
            "route": getattr(route, "path", None),
            "path_params": request.scope.get("path_params") or {},
            "status_code": status_code,
            "duration_ms": round((time.perf_counter() - start_time) * 1000, 2),
        }
        if request.query_params:
            fields["query_params"] = dict(request.query_params)

        log = getattr(logger, status_log_level(status_code))
        log("Request completed", **fields)


# ============================================================================
# Unexpected Error Middleware
# ============================================================================


class UnexpectedErrorMiddleware(BaseHTTPMiddleware):
    """Turn any exception that escapes the routers into a generic 500.

    Domain and request-validation errors never reach this point; they are
    mapped by the exception handlers in main. The exception is logged with
    its traceback and the client only sees INTERNAL_ERROR.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception(
                "Unhandled exception",
                method=request.method,
                path=request.url.path,
            )

            headers = {}
            request_id = getattr(request.state, "request_id", None)
            if request_id:
                headers[REQUEST_ID_HEADER] = request_id

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=error_content(
                    request, "INTERNAL_ERROR", "An internal error occurred"
                ),
                headers=headers,
            )


# ============================================================================
# Middleware Setup
# ============================================================================


def setup_middleware(app: FastAPI) -> None:
    """Configure all middleware for the application.

    Middleware is added in reverse order (last added = first executed).

    Args:
        app: FastAPI application instance.
    """
    # Unexpected errors (outermost, catches everything the routers raise)
    app.add_middleware(UnexpectedErrorMiddleware)

    # Request ID correlation and access log
    app.add_middleware(RequestLoggingMiddleware)
