"""
Integration tests for the search endpoints.
"""


class TestSearchApi:
    """Test POST /<collection>/search"""

    def test_order_by_id_returns_object(self, client, sample_data):
        response = client.post("/orders/search", json={"orderId": 1})

        assert response.status_code == 200
        assert response.json() == sample_data["orders"][0]

    def test_orders_by_status_returns_array(self, client):
        response = client.post("/orders/search", json={"status": "completed"})

        assert response.status_code == 200
        assert [o["id"] for o in response.json()] == [1, 2, 4]

    def test_category_by_id(self, client, sample_data):
        response = client.post("/categories/search", json={"categoryId": 2})
        assert response.json() == sample_data["categories"][1]

    def test_product_by_id_keeps_stored_shape(self, client, sample_data):
        response = client.post("/products/search", json={"productId": 2})
        assert response.json() == sample_data["products"][1]

    def test_products_by_name(self, client):
        response = client.post("/products/search", json={"name": "PHONE"})
        assert [p["id"] for p in response.json()] == [3, 4, 5]

    def test_review_by_product_and_user(self, client):
        response = client.post("/reviews/search", json={"productId": 3, "userId": 2})
        assert response.json()["id"] == 2

    def test_user_by_email(self, client):
        response = client.post("/users/search", json={"email": "alan@example.com"})
        assert response.json()["lastName"] == "Turing"

    def test_users_by_last_name(self, client):
        response = client.post("/users/search", json={"lastName": "LOVE"})
        assert [u["id"] for u in response.json()] == [1]
