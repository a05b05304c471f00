"""Tests for category API endpoints."""

import pytest
from fastapi.testclient import TestClient


class TestListCategories:
    """Tests for GET /api/categories."""

    def test_empty(self, client: TestClient) -> None:
        """Empty catalog returns an empty list."""
        response = client.get("/api/categories")
        assert response.status_code == 200
        assert response.json() == []

    def test_sorted_by_name_with_counts(self, client: TestClient, create_product) -> None:
        """Categories are ordered by name with active product counts."""
        client.post("/api/categories", json={"name": "Sports"})
        create_product(name="Laptop")
        create_product(name="Smartphone")

        response = client.get("/api/categories")

        assert response.status_code == 200
        data = response.json()
        assert [c["name"] for c in data] == ["Electronics", "Sports"]
        assert [c["productCount"] for c in data] == [2, 0]


class TestCreateCategory:
    """Tests for POST /api/categories."""

    def test_create(self, client: TestClient) -> None:
        """Creating returns 201, the camelCase body and a Location header."""
        response = client.post(
            "/api/categories",
            json={"name": "Books", "description": "Books and educational materials"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data == {
            "id": data["id"],
            "name": "Books",
            "description": "Books and educational materials",
            "isActive": True,
            "productCount": 0,
        }
        assert response.headers["Location"].endswith(f"/api/categories/{data['id']}")

    def test_create_name_too_long(self, client: TestClient) -> None:
        """Names over 50 characters are rejected with 400."""
        response = client.post("/api/categories", json={"name": "x" * 51})

        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["details"][0]["field"] == "name"
        assert client.get("/api/categories").json() == []

    def test_create_missing_name(self, client: TestClient) -> None:
        """A body without name fails request validation with 400."""
        response = client.post("/api/categories", json={"description": "No name"})

        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"


class TestGetCategory:
    """Tests for GET /api/categories/{id}."""

    def test_get(self, client: TestClient, category: dict) -> None:
        """Existing category is returned."""
        response = client.get(f"/api/categories/{category['id']}")
        assert response.status_code == 200
        assert response.json() == category

    def test_not_found(self, client: TestClient) -> None:
        """Unknown IDs return 404 with the standard error body."""
        response = client.get("/api/categories/999")

        assert response.status_code == 404
        data = response.json()
        assert data["error_code"] == "CATEGORY_NOT_FOUND"
        assert data["message"] == "Category with ID 999 was not found"
        assert data["request_id"] == response.headers["X-Request-ID"]

    def test_non_integer_id(self, client: TestClient) -> None:
        """Non-integer IDs are rejected with 400."""
        response = client.get("/api/categories/abc")
        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    @pytest.mark.parametrize("category_id", [0, 2**31, 10**20])
    def test_out_of_range_id(self, client: TestClient, category_id: int) -> None:
        """IDs outside the integer column range are rejected with 400."""
        response = client.get(f"/api/categories/{category_id}")

        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["details"][0]["field"] == "category_id"


class TestUpdateCategory:
    """Tests for PUT /api/categories/{id}."""

    def test_update(self, client: TestClient, category: dict) -> None:
        """Update replaces name and description."""
        response = client.put(
            f"/api/categories/{category['id']}",
            json={"name": "Gadgets", "description": "Small electronics"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Gadgets"
        assert data["description"] == "Small electronics"
        assert client.get(f"/api/categories/{category['id']}").json()["name"] == "Gadgets"

    def test_update_not_found(self, client: TestClient) -> None:
        """Updating an unknown category returns 404."""
        response = client.put("/api/categories/999", json={"name": "Ghost"})
        assert response.status_code == 404

    def test_update_invalid(self, client: TestClient, category: dict) -> None:
        """Over-long descriptions are rejected."""
        response = client.put(
            f"/api/categories/{category['id']}",
            json={"name": "Electronics", "description": "x" * 201},
        )
        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "description"


class TestDeleteCategory:
    """Tests for DELETE /api/categories/{id}."""

    def test_delete(self, client: TestClient, category: dict) -> None:
        """Deleting returns 204 and hides the category."""
        response = client.delete(f"/api/categories/{category['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"/api/categories/{category['id']}").status_code == 404
        assert client.get("/api/categories").json() == []

    def test_delete_with_active_products(
        self, client: TestClient, category: dict, create_product
    ) -> None:
        """A category with active products cannot be deleted."""
        create_product()

        response = client.delete(f"/api/categories/{category['id']}")

        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "CATEGORY_HAS_ACTIVE_PRODUCTS"
        assert "Electronics" in data["message"]
        assert client.get(f"/api/categories/{category['id']}").status_code == 200

    def test_delete_after_products_deleted(
        self, client: TestClient, category: dict, create_product
    ) -> None:
        """Once its products are soft-deleted the category can be deleted."""
        product = create_product()
        client.delete(f"/api/products/{product['id']}")

        response = client.delete(f"/api/categories/{category['id']}")

        assert response.status_code == 204

    def test_delete_not_found(self, client: TestClient) -> None:
        """Deleting an unknown category returns 404."""
        response = client.delete("/api/categories/999")
        assert response.status_code == 404
