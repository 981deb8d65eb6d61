"""
Order Models
Response models for order reporting endpoints.
"""

from typing import Any, Dict, List, Optional

from pydantic import Field

from .common import CamelModel, Number, RawValue


class RecentOrder(CamelModel):
    """Order projection with the buyer's name."""

    order_id: RawValue = None
    user_id: RawValue = None
    user_name: str
    total_amount: Number
    status: Optional[str] = None
    payment_method: Optional[str] = None
    items_count: int
    created_at: RawValue = None


class RecentOrders(CamelModel):
    """A page of orders, newest first."""

    total_orders: int = Field(..., description="All orders, before paging")
    limit: int
    offset: int
    orders: List[RecentOrder]


class OrderStatistics(CamelModel):
    """Totals and distributions over all orders."""

    total_orders: int
    total_revenue: Number
    average_order_value: Number
    total_items: int = Field(..., description="Line items across all orders")
    highest_order: Number
    lowest_order: Number
    status_distribution: Dict[str, int]
    payment_method_distribution: Dict[str, int]


class OrderLineDetail(CamelModel):
    """Line item with product and category names and its subtotal."""

    product_id: RawValue = None
    product_name: str
    category_name: Optional[str] = None
    variant_id: RawValue = None
    quantity: Number
    price: Number
    subtotal: Number = Field(..., description="quantity × price (2dp)")


class OrderCustomer(CamelModel):
    """Buyer of an order."""

    id: RawValue = None
    name: str
    email: Optional[str] = None


class OrderDetails(CamelModel):
    """One order with its buyer and resolved line items."""

    order_id: RawValue = None
    user: Optional[OrderCustomer] = Field(None, description="Null when the buyer does not exist")
    items: List[OrderLineDetail]
    total_amount: Number
    shipping_address: Optional[Any] = None
    payment: Optional[Dict[str, Any]] = None
    status: Optional[str] = None
    created_at: RawValue = None
    modified_at: RawValue = None
