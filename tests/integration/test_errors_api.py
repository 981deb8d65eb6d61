"""
Integration tests for input validation and error bodies.
"""

import pytest

from shopstats.api.dependencies import get_store
from shopstats.api.main import app
from shopstats.db import DataStore


class TestInvalidIds:
    """Test the {id} path parameter"""

    @pytest.mark.parametrize(
        "path",
        [
            "/categories/abc/products-summary",
            "/products/abc/reviews-summary",
            "/users/abc/total-spent",
            "/categories/Infinity/sales-stats",
            "/orders/abc/details",
            "/users/abc/activity",
        ],
    )
    def test_non_numeric_id_is_rejected(self, client, path):
        response = client.get(path)

        assert response.status_code == 400
        assert response.json() == {"error": "invalid id"}


class TestNotFound:
    """Test missing primary entities"""

    @pytest.mark.parametrize(
        "path, message",
        [
            ("/categories/404/products-summary", "category not found"),
            ("/categories/404/trending-products", "category not found"),
            ("/products/404/reviews-summary", "product not found"),
            ("/products/404/variants-summary", "product not found"),
            ("/users/404/order-history", "user not found"),
            ("/users/404/purchase-summary", "user not found"),
            ("/users/404/payment-methods-summary", "user not found"),
            ("/users/404/activity", "user not found"),
            ("/orders/404/details", "order not found"),
            ("/sellers/404/dashboard", "seller not found"),
            ("/sellers/404/analytics", "seller not found"),
        ],
    )
    def test_missing_entity(self, client, path, message):
        response = client.get(path)

        assert response.status_code == 404
        assert response.json() == {"error": message}


class TestLowStockValidation:
    """Test low-stock query validation"""

    @pytest.mark.parametrize("threshold", ["-1", "abc", "inf"])
    def test_invalid_threshold(self, client, threshold):
        response = client.get("/products/low-stock", params={"threshold": threshold})

        assert response.status_code == 400
        assert response.json() == {"error": "invalid threshold"}

    def test_invalid_category(self, client):
        response = client.get("/products/low-stock", params={"categoryId": "abc"})

        assert response.status_code == 400
        assert response.json() == {"error": "invalid categoryId"}


class TestSearchErrors:
    """Test search error bodies"""

    @pytest.mark.parametrize(
        "path", ["/categories/search", "/orders/search", "/products/search", "/reviews/search", "/users/search"]
    )
    def test_empty_body(self, client, path):
        response = client.post(path, json={})

        assert response.status_code == 400
        assert response.json() == {"error": "At least one search field is required"}

    def test_missing_body(self, client):
        response = client.post("/users/search")

        assert response.status_code == 400
        assert response.json() == {"error": "At least one search field is required"}

    @pytest.mark.parametrize(
        "path, body, message",
        [
            ("/categories/search", {"name": "toys"}, "No categories found"),
            ("/orders/search", {"orderId": 99}, "No orders found"),
            ("/products/search", {"name": "toaster"}, "No products found"),
            ("/reviews/search", {"rating": 1}, "No reviews found"),
            ("/users/search", {"email": "nobody@example.com"}, "No users found"),
        ],
    )
    def test_no_matches(self, client, path, body, message):
        response = client.post(path, json=body)

        assert response.status_code == 404
        assert response.json() == {"error": message}

    def test_malformed_body(self, client):
        response = client.post("/users/search", json={"email": ["not", "a", "string"]})

        assert response.status_code == 422
        assert response.json()["error"] == "Request validation failed"


class TestBlankInput:
    """Test whitespace-only ids and query values"""

    @pytest.mark.parametrize(
        "path, message",
        [
            ("/users/%20/total-spent", "user not found"),
            ("/categories/%20%20/products-summary", "category not found"),
            ("/products/%20/reviews-summary", "product not found"),
        ],
    )
    def test_blank_id_is_looked_up_as_zero(self, client, path, message):
        response = client.get(path)

        assert response.status_code == 404
        assert response.json() == {"error": message}

    def test_blank_threshold_uses_default(self, client):
        blank = client.get("/products/low-stock", params={"threshold": "  "})
        default = client.get("/products/low-stock")

        assert blank.status_code == 200
        assert blank.json()["threshold"] == 10
        assert blank.json() == default.json()

    def test_threshold_with_digit_separator_is_rejected(self, client):
        response = client.get("/products/low-stock", params={"threshold": "1_0"})

        assert response.status_code == 400
        assert response.json() == {"error": "invalid threshold"}

    def test_id_with_digit_separator_is_rejected(self, client):
        response = client.get("/users/1_0/total-spent")

        assert response.status_code == 400
        assert response.json() == {"error": "invalid id"}


class TestLargeAmounts:
    """Test sums too large for two-decimal fixed point"""

    def test_huge_order_total(self, client, sample_data):
        sample_data["orders"][0]["totalAmount"] = 1e30
        app.dependency_overrides[get_store] = lambda: DataStore.from_dict(sample_data)

        response = client.get("/users/1/total-spent")

        assert response.status_code == 200
        assert response.json()["total"] == 1e30

    def test_huge_product_price(self, client, sample_data):
        sample_data["products"][0]["price"] = "99999999999999999999999999.5"
        app.dependency_overrides[get_store] = lambda: DataStore.from_dict(sample_data)

        response = client.get("/categories/1/products-summary")

        assert response.status_code == 200
        assert response.json()["totalProducts"] == 2
        assert response.json()["priceRange"]["max"] == 1e26


class TestSellerIds:
    """Test the {sellerId} path parameter"""

    @pytest.mark.parametrize("path", ["/sellers/abc/dashboard", "/sellers/NaN/analytics", "/sellers/1_0/dashboard"])
    def test_invalid_seller_id(self, client, path):
        response = client.get(path)

        assert response.status_code == 400
        assert response.json() == {"error": "invalid seller id"}

    def test_blank_seller_id_is_looked_up_as_zero(self, client):
        response = client.get("/sellers/%20/analytics")

        assert response.status_code == 404
        assert response.json() == {"error": "seller not found"}
