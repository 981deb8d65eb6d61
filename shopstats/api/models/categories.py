"""
Category Models
Response models for category reporting endpoints.
"""

from typing import List, Optional

from pydantic import ConfigDict, Field

from .common import CamelModel, Number, PriceRange, RawValue


class CategoryProductsSummary(CamelModel):
    """Product counts, stock and price statistics of a category."""

    category_id: Number
    category_name: Optional[str] = None
    total_products: int = Field(..., description="Products in the category")
    active_products: int = Field(..., description="Products with status 'active'")
    total_stock: Number = Field(..., description="Sum of main stock")
    average_price: Number = Field(..., description="Mean of positive prices (2dp)")
    price_range: PriceRange

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "categoryId": 1,
                "categoryName": "Produce",
                "totalProducts": 25,
                "activeProducts": 20,
                "totalStock": 1500,
                "averagePrice": 45.5,
                "priceRange": {"min": 10.0, "max": 99.99},
            }
        }
    )


class SubcategorySummary(CamelModel):
    """Direct child category with its product count."""

    id: RawValue = None
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    product_count: int


class CategorySubcategories(CamelModel):
    """One level of the category hierarchy below a category."""

    category_id: Number
    category_name: Optional[str] = None
    parent_id: RawValue = None
    subcategories: List[SubcategorySummary]
    total_products: int = Field(..., description="Own products plus direct children's products")
    depth: int = Field(..., description="1 if the category has children, else 0")


class TrendingProduct(CamelModel):
    """Product sales inside the trending window."""

    product_id: Number
    product_name: Optional[str] = None
    sales_count: Number
    revenue: Number
    price: Number
    status: Optional[str] = None


class CategoryTrendingProducts(CamelModel):
    """Best sellers of a category over the trending window."""

    category_id: Number
    category_name: Optional[str] = None
    period: str = Field(..., description="Window length, e.g. '7 days'")
    trending_products: List[TrendingProduct]
    total_trending_products: int


class ProductReviewStats(CamelModel):
    """Review count and average rating of one product."""

    product_id: Number
    product_name: Optional[str] = None
    total_reviews: int
    average_rating: Number


class CategoryReviewsStatistics(CamelModel):
    """Review statistics across all products of a category."""

    category_id: Number
    category_name: Optional[str] = None
    total_products: int
    total_reviews: int
    average_rating: Number
    products_with_reviews: int
    top_reviewed_products: List[ProductReviewStats]


class ProductSales(CamelModel):
    """Units sold and revenue of one product."""

    product_id: Number
    product_name: Optional[str] = None
    sales_count: Number
    revenue: Number


class CategorySalesStats(CamelModel):
    """All-time sales of a category's products."""

    category_id: Number
    category_name: Optional[str] = None
    total_products: int
    total_sales: Number
    total_revenue: Number
    average_order_value: Number = Field(..., description="Category revenue divided by all orders")
    top_selling_products: List[ProductSales]
