"""
Order Service
Recent-orders feed, order-wide statistics and single-order details.
"""

import logging
from typing import Dict

from ...analytics import (
    UNKNOWN,
    full_name,
    round2,
    to_float,
    to_int_or_float,
    to_number,
    to_timestamp,
)
from ...db import Order
from ..models import (
    OrderCustomer,
    OrderDetails,
    OrderLineDetail,
    OrderStatistics,
    RecentOrder,
    RecentOrders,
)
from .base import ReportingService

logger = logging.getLogger(__name__)


def payment_method(order: Order):
    """Payment method of an order, None when missing or empty."""
    return (order.payment.method if order.payment else None) or None


class OrderService(ReportingService):
    """Reports over all orders."""

    def recent(self, limit: int = 10, offset: int = 0) -> RecentOrders:
        """
        A page of orders, newest first.

        Orders without ``createdAt`` sort as epoch 0. ``totalOrders`` is the
        size of the whole collection.
        """
        orders = self.store.orders.all()
        orders.sort(key=lambda o: -to_timestamp(o.created_at))

        page = []
        for order in orders[offset:offset + limit]:
            user = self.store.users.get(to_number(order.user_id))
            page.append(
                RecentOrder(
                    order_id=order.id,
                    user_id=order.user_id,
                    user_name=full_name(user) if user else UNKNOWN,
                    total_amount=to_float(order.total_amount),
                    status=order.status,
                    payment_method=payment_method(order),
                    items_count=len(order.items or []),
                    created_at=order.created_at or None,
                )
            )

        return RecentOrders(total_orders=len(orders), limit=limit, offset=offset, orders=page)

    def statistics(self) -> OrderStatistics:
        """Revenue totals, extremes and status/payment distributions over all orders."""
        orders = self.store.orders.all()

        amounts = [to_float(order.total_amount) for order in orders]
        total_revenue = sum(amounts)
        positive = [amount for amount in amounts if amount > 0]

        status_distribution: Dict[str, int] = {}
        method_distribution: Dict[str, int] = {}
        for order in orders:
            status = order.status or "unknown"
            status_distribution[status] = status_distribution.get(status, 0) + 1
            method = payment_method(order) or "unknown"
            method_distribution[method] = method_distribution.get(method, 0) + 1

        return OrderStatistics(
            total_orders=len(orders),
            total_revenue=round2(total_revenue),
            average_order_value=round2(total_revenue / len(orders)) if orders else 0,
            total_items=sum(len(order.items or []) for order in orders),
            highest_order=round2(max(positive)) if positive else 0,
            lowest_order=round2(min(positive)) if positive else 0,
            status_distribution=status_distribution,
            payment_method_distribution=method_distribution,
        )

    def details(self, order_id) -> OrderDetails:
        """
        One order with its buyer and line items resolved.

        Line items name their product ("Unknown" when it is gone) and the
        product's category (null when unknown). A missing buyer is null.

        Raises:
            ResourceNotFoundError: If the order does not exist
        """
        order = self._require(self.store.orders, "order", order_id)

        user = self.store.users.get(to_number(order.user_id))
        customer = None
        if user is not None:
            customer = OrderCustomer(id=user.id, name=full_name(user), email=user.email)

        items = []
        for item in order.items or []:
            product = self.store.products.get(to_number(item.product_id))
            quantity = to_float(item.quantity)
            price = to_float(item.price)
            items.append(
                OrderLineDetail(
                    product_id=item.product_id,
                    product_name=product.name if product and product.name else UNKNOWN,
                    category_name=self._category_name(product.category_id, default=None) if product else None,
                    variant_id=item.variant_id,
                    quantity=to_int_or_float(quantity),
                    price=to_int_or_float(price),
                    subtotal=round2(quantity * price),
                )
            )

        return OrderDetails(
            order_id=order.id,
            user=customer,
            items=items,
            total_amount=to_float(order.total_amount),
            shipping_address=order.shipping_address or None,
            payment=order.payment.to_dict() if order.payment else None,
            status=order.status,
            created_at=order.created_at or None,
            modified_at=order.modified_at or None,
        )
