"""
Product Models
Response models for product reporting endpoints.
"""

from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, Field

from .common import CamelModel, Number, PriceRange, RawValue


class LowStockProduct(CamelModel):
    """Product whose main plus variant stock is at or below the threshold."""

    product_id: RawValue = None
    product_name: Optional[str] = None
    category_id: RawValue = None
    category_name: Optional[str] = None
    main_stock: Number
    variant_stock: Number
    total_stock: Number
    status: Optional[str] = None
    price: Number


class LowStockReport(CamelModel):
    """Inventory alert, most critical product first."""

    threshold: Number
    category_id: Optional[Number] = None
    total_low_stock_products: int
    products: List[LowStockProduct]


class RecentReview(CamelModel):
    """Review projection with the reviewer's display name."""

    review_id: Optional[Number] = None
    user_id: Optional[Number] = None
    user_name: Optional[str] = None
    rating: Optional[Number] = None
    comment: Optional[str] = None
    created_at: RawValue = None


class ProductReviewsSummary(CamelModel):
    """Review count, average, rating distribution and latest reviews."""

    product_id: Number
    product_name: Optional[str] = None
    total_reviews: int = Field(..., description="All reviews, including out-of-range ratings")
    average_rating: Number
    rating_distribution: Dict[str, int] = Field(..., description="Counts for ratings 1 to 5")
    recent_reviews: List[RecentReview]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "productId": 1,
                "productName": "Cotton Tee",
                "totalReviews": 2,
                "averageRating": 4.5,
                "ratingDistribution": {"1": 0, "2": 0, "3": 0, "4": 1, "5": 1},
                "recentReviews": [],
            }
        }
    )


class Recommendation(CamelModel):
    """Active product from the same category."""

    product_id: RawValue = None
    product_name: Optional[str] = None
    price: Number
    stock: Number
    status: Optional[str] = None
    tags: List[Any] = Field(default_factory=list)


class ProductRecommendations(CamelModel):
    """Same-category products ranked by price closeness."""

    product_id: RawValue = None
    product_name: Optional[str] = None
    category_id: Optional[Number] = None
    recommendations: List[Recommendation]
    total_recommendations: int


class ProductSalesStats(CamelModel):
    """All-time sales of one product."""

    product_id: Number
    product_name: Optional[str] = None
    total_sales: Number = Field(..., description="Units sold")
    total_revenue: Number
    orders_count: int = Field(..., description="Orders containing the product")
    average_order_value: Number


class TopReviewedProduct(CamelModel):
    """Review statistics of a reviewed product."""

    product_id: Number
    product_name: Optional[str] = None
    category_id: Optional[Number] = None
    total_reviews: int
    average_rating: Number
    latest_review_date: Number = Field(..., description="Newest review, epoch millis")
    category_name: Optional[str] = None


class TopReviewedProducts(CamelModel):
    """Products ranked by review count, then average rating."""

    total_products: int
    limit: int
    top_reviewed_products: List[TopReviewedProduct]


class VariantSummary(CamelModel):
    """Variant projection with coerced price and stock."""

    id: Optional[Any] = None
    color: Optional[str] = None
    size: Optional[str] = None
    price: Number
    stock: Number
    is_available: bool


class ProductVariantsSummary(CamelModel):
    """Stock, price and attribute breakdown of a product's variants."""

    product_id: RawValue = None
    product_name: Optional[str] = None
    total_variants: int
    total_variant_stock: Number
    available_variants: int
    out_of_stock_variants: int
    variant_price_range: PriceRange
    color_distribution: Dict[str, int]
    size_distribution: Dict[str, int]
    variants: List[VariantSummary]
