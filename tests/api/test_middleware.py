"""Tests for API middleware."""

import json
import logging

import pytest
from fastapi.testclient import TestClient

from product_catalog.api.middleware import status_log_level
from product_catalog.infrastructure.database import get_session
from product_catalog.main import app


def completed_requests(caplog: pytest.LogCaptureFixture) -> list[dict]:
    """Decode the access log entries captured so far."""
    # Other libraries log plain text alongside the JSON lines
    messages = [record.getMessage() for record in caplog.records]
    entries = [json.loads(message) for message in messages if message.startswith("{")]
    return [entry for entry in entries if entry.get("event") == "Request completed"]


class TestRequestId:
    """Tests for request ID correlation."""

    def test_generates_request_id_if_not_provided(self, client: TestClient) -> None:
        """Should generate request ID if not in request headers."""
        response = client.get("/health")
        assert response.status_code == 200
        assert "X-Request-ID" in response.headers
        # UUID format
        request_id = response.headers["X-Request-ID"]
        assert len(request_id) == 36

    def test_uses_provided_request_id(self, client: TestClient) -> None:
        """Should use request ID from request headers."""
        custom_id = "custom-request-id-12345"
        response = client.get(
            "/api/categories",
            headers={"X-Request-ID": custom_id},
        )
        assert response.status_code == 200
        assert response.headers["X-Request-ID"] == custom_id

    def test_request_id_in_error_body(self, client: TestClient) -> None:
        """Error responses carry the request ID."""
        response = client.get(
            "/api/products/999",
            headers={"X-Request-ID": "trace-me"},
        )
        assert response.status_code == 404
        assert response.json()["request_id"] == "trace-me"


class TestRequestLogging:
    """Tests for the per-request access log."""

    @pytest.mark.parametrize(
        "status_code,level",
        [(200, "info"), (204, "info"), (400, "warning"), (404, "warning"), (500, "error")],
    )
    def test_status_log_level(self, status_code: int, level: str) -> None:
        """Client errors are warnings and server errors are errors."""
        assert status_log_level(status_code) == level

    def test_logs_route_and_product_id(
        self, client: TestClient, create_product, caplog: pytest.LogCaptureFixture
    ) -> None:
        """The entry names the route template and the product ID."""
        product = create_product()
        caplog.set_level(logging.INFO)
        caplog.clear()

        client.get(f"/api/products/{product['id']}", headers={"X-Request-ID": "read-1"})

        [entry] = completed_requests(caplog)
        assert entry["method"] == "GET"
        assert entry["route"] == "/api/products/{product_id}"
        assert entry["path_params"] == {"product_id": str(product["id"])}
        assert entry["status_code"] == 200
        assert entry["level"] == "info"
        assert entry["request_id"] == "read-1"
        assert entry["duration_ms"] >= 0

    def test_missing_category_logged_as_warning(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A 404 for a category is logged at warning level."""
        caplog.set_level(logging.INFO)

        client.get("/api/categories/999")

        [entry] = completed_requests(caplog)
        assert entry["route"] == "/api/categories/{category_id}"
        assert entry["path_params"] == {"category_id": "999"}
        assert entry["status_code"] == 404
        assert entry["level"] == "warning"

    def test_search_logs_query_params(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Search requests log the filters they were given."""
        caplog.set_level(logging.INFO)

        client.get("/api/products/search", params={"searchTerm": "laptop", "inStock": "true"})

        [entry] = completed_requests(caplog)
        assert entry["route"] == "/api/products/search"
        assert entry["path_params"] == {}
        assert entry["query_params"] == {"searchTerm": "laptop", "inStock": "true"}

    def test_unknown_route_has_no_template(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Requests that match no route log a null route."""
        caplog.set_level(logging.INFO)

        client.get("/api/unknown")

        [entry] = completed_requests(caplog)
        assert entry["route"] is None
        assert entry["status_code"] == 404


class TestErrorHandling:
    """Tests for unexpected error handling."""

    def test_unhandled_exception_returns_generic_500(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Unexpected errors return 500 without leaking details."""

        async def broken_session():
            raise RuntimeError("connection string contains secret")
            yield  # pragma: no cover

        app.dependency_overrides[get_session] = broken_session
        caplog.set_level(logging.INFO)

        response = client.get("/api/categories", headers={"X-Request-ID": "boom"})

        assert response.status_code == 500
        assert response.headers["X-Request-ID"] == "boom"
        data = response.json()
        assert data == {
            "error_code": "INTERNAL_ERROR",
            "message": "An internal error occurred",
            "details": [],
            "request_id": "boom",
        }
        assert "secret" not in response.text

        [entry] = completed_requests(caplog)
        assert entry["status_code"] == 500
        assert entry["level"] == "error"

    def test_unknown_route(self, client: TestClient) -> None:
        """Unknown routes use the standard error body."""
        response = client.get("/api/unknown")
        assert response.status_code == 404
        assert response.json()["error_code"] == "ERROR"
