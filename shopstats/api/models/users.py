"""
User Models
Response models for user reporting endpoints.
"""

from typing import Dict, List, Optional

from pydantic import ConfigDict, Field

from .common import CamelModel, Number, RawValue


class UserTotalSpent(CamelModel):
    """Sum of a user's order amounts."""

    user_id: Number
    orders_count: int
    total: Number

    model_config = ConfigDict(
        json_schema_extra={"example": {"userId": 1, "ordersCount": 2, "total": 150.0}}
    )


class OrderHistoryEntry(CamelModel):
    """Order projection in a user's history."""

    id: RawValue = None
    total_amount: Number
    status: Optional[str] = None
    payment_method: Optional[str] = None
    created_at: RawValue = None
    items_count: int


class UserOrderHistory(CamelModel):
    """A user's orders with totals and favourite category."""

    user_id: Number
    user_name: str
    total_orders: int
    orders: List[OrderHistoryEntry]
    total_spent: Number
    favorite_category: Optional[str] = Field(
        None, description="Category with the most purchased line items"
    )


class UserReview(CamelModel):
    """Review projection with the product's name."""

    review_id: Optional[Number] = None
    product_id: Optional[Number] = None
    product_name: Optional[str] = None
    rating: Optional[Number] = None
    comment: Optional[str] = None
    created_at: RawValue = None


class UserReviewsHistory(CamelModel):
    """All reviews written by a user, newest first."""

    user_id: Number
    user_name: Optional[str] = None
    total_reviews: int
    average_rating: Number
    reviews_by_product_count: int = Field(..., description="Distinct products reviewed")
    reviews: List[UserReview]


class PurchasedCategory(CamelModel):
    """Category with the most units bought."""

    category_id: RawValue = None
    category_name: Optional[str] = None
    total_quantity: Number


class PurchasedProduct(CamelModel):
    """Product with the most units bought."""

    product_id: RawValue = None
    product_name: Optional[str] = None
    total_quantity: Number


class UserPurchaseSummary(CamelModel):
    """Spending and most purchased category/product of a user."""

    user_id: Number
    user_name: str
    total_orders: int
    total_spent: Number
    average_order_value: Number
    most_purchased_category: Optional[PurchasedCategory] = None
    most_purchased_product: Optional[PurchasedProduct] = None


class PaymentMethodUsage(CamelModel):
    """How often and how much a user paid with one method."""

    usage_count: int
    total_spent: Number
    average_order_value: Number
    usage_percentage: Number = Field(..., description="Share of the user's paid orders (2dp)")


class UserPaymentMethodsSummary(CamelModel):
    """A user's orders broken down by payment method."""

    user_id: Number
    user_name: Optional[str] = None
    total_orders: int = Field(..., description="Orders with a payment method")
    total_amount: Number
    preferred_method: str
    payment_methods: Dict[str, PaymentMethodUsage]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "userId": 1,
                "userName": "Ada Lovelace",
                "totalOrders": 2,
                "totalAmount": 1920.0,
                "preferredMethod": "paypal",
                "paymentMethods": {
                    "credit_card": {
                        "usageCount": 1,
                        "totalSpent": 520.0,
                        "averageOrderValue": 520.0,
                        "usagePercentage": 50.0,
                    },
                },
            }
        }
    )


class ActivityOrder(CamelModel):
    """Order projection in a user's activity feed."""

    order_id: RawValue = None
    total_amount: Number
    status: Optional[str] = None
    created_at: RawValue = None


class CategoryActivity(CamelModel):
    """Line items a user bought in one category."""

    category_id: Optional[Number] = None
    category_name: str
    order_count: int = Field(..., description="Purchased line items in the category")


class UserActivity(CamelModel):
    """Recent orders and favourite categories of a user."""

    user_id: Number
    user_name: str
    total_orders: int
    total_spent: Number
    recent_orders: List[ActivityOrder] = Field(..., description="Five newest orders")
    top_categories: List[CategoryActivity] = Field(..., description="Three most bought categories")
    last_activity: Optional[Number] = Field(None, description="Newest order time in epoch millis")
    is_active: bool
