"""
Unit tests for SellerService
"""

import pytest

from shopstats.api.errors import ResourceNotFoundError
from shopstats.api.services import SellerService
from shopstats.db import DataStore


@pytest.fixture
def service(store):
    return SellerService(store)


class TestDashboard:
    """Test the seller dashboard"""

    def test_catalog_and_sales(self, service):
        result = service.dashboard(2)

        assert result.seller_id == 2
        assert result.seller_name == "Alan Turing"
        # Product 7 references the seller as the string "2"
        assert result.total_products == 4
        assert result.active_products == 4
        assert result.total_sales == 5
        assert result.total_revenue == 1030.0

    def test_top_selling_products_by_units(self, service):
        top = service.dashboard(2).top_selling_products

        assert [(p.product_id, p.product_name, p.sales_count, p.revenue) for p in top] == [
            (1, "USB Cable", 3, 30.0),
            (3, "Phone X", 2, 1000.0),
        ]

    def test_products_by_category_in_id_order(self, service):
        by_category = service.dashboard(2).products_by_category

        assert [(c.category_id, c.category_name, c.product_count) for c in by_category] == [
            (1, "Electronics", 1),
            (2, "Phones", 1),
            (4, "Garden", 1),
            (99, "Unknown", 1),
        ]

    def test_seller_without_products(self, service):
        result = service.dashboard(3)

        assert result.total_products == 0
        assert result.total_sales == 0
        assert result.total_revenue == 0
        assert result.top_selling_products == []
        assert result.products_by_category == []

    def test_unknown_seller(self, service):
        with pytest.raises(ResourceNotFoundError) as exc_info:
            service.dashboard(404)

        assert exc_info.value.message == "seller not found"


class TestAnalytics:
    """Test seller analytics"""

    def test_totals(self, service):
        result = service.analytics(2)

        assert result.total_products == 4
        assert result.total_sales == 5
        assert result.total_revenue == 1030.0
        # "abc" has no positive price
        assert result.average_product_price == 180.0
        assert result.total_stock == 156
        assert sum(result.monthly_revenue.values()) == pytest.approx(1030.0)

    def test_top_category_tie_goes_to_later_id(self, service):
        top = service.analytics(2).top_category

        assert (top.category_id, top.category_name, top.product_count) == (99, "Unknown", 1)

    def test_monthly_revenue_buckets(self):
        store = DataStore.from_dict({
            "users": [{"id": 5, "firstName": "Grace", "lastName": "Hopper"}],
            "categories": [{"id": 1, "name": "Books"}, {"id": 2, "name": "Music"}],
            "products": [
                {"id": 1, "sellerId": 5, "categoryId": 2, "price": 10, "stock": 3},
                {"id": 2, "sellerId": 5, "categoryId": 1, "price": 20, "stock": "4"},
                {"id": 3, "sellerId": 5, "categoryId": 1, "price": 0, "stock": None},
                {"id": 4, "sellerId": 6, "categoryId": 2, "price": 99, "stock": 9},
            ],
            "orders": [
                {"id": 1, "createdAt": "2024-03-31T23:30:00Z",
                 "items": [{"productId": 1, "quantity": 2, "price": 10}]},
                {"id": 2, "createdAt": "2024-04-01T08:00:00Z",
                 "items": [{"productId": 2, "quantity": 1, "price": 20.25},
                           {"productId": 4, "quantity": 5, "price": 99}]},
                {"id": 3, "createdAt": 1709251200000,
                 "items": [{"productId": 1, "quantity": 1, "price": 10}]},
                {"id": 4, "items": [{"productId": 2, "quantity": 1, "price": 20}]},
                {"id": 5, "createdAt": "not a date",
                 "items": [{"productId": 2, "quantity": 1, "price": 20}]},
            ],
        })

        result = SellerService(store).analytics(5)

        assert result.monthly_revenue == {"2024-03": 30.0, "2024-04": 20.25}
        assert list(result.monthly_revenue) == ["2024-03", "2024-04"]
        assert result.total_sales == 6
        assert result.total_revenue == 90.25
        assert result.average_product_price == 15.0
        assert result.total_stock == 7
        assert (result.top_category.category_id, result.top_category.product_count) == (1, 2)

    def test_seller_without_products(self, service):
        result = service.analytics(3)

        assert result.top_category is None
        assert result.average_product_price == 0
        assert result.total_stock == 0
        assert result.monthly_revenue == {}

    def test_unknown_seller(self, service):
        with pytest.raises(ResourceNotFoundError):
            service.analytics(404)
