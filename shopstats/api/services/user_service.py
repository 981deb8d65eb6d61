"""
User Service
Spending, order, review, purchase, payment and activity reports for one user.
"""

import logging
from typing import Dict, List, Optional

from ...analytics import (
    UNKNOWN,
    average,
    display_name,
    full_name,
    round2,
    same_id,
    to_float,
    to_int_or_float,
    to_number,
    to_timestamp,
)
from ...db import Order
from ..models import (
    ActivityOrder,
    CategoryActivity,
    OrderHistoryEntry,
    PaymentMethodUsage,
    PurchasedCategory,
    PurchasedProduct,
    UserActivity,
    UserOrderHistory,
    UserPaymentMethodsSummary,
    UserPurchaseSummary,
    UserReview,
    UserReviewsHistory,
    UserTotalSpent,
)
from .base import ReportingService, ascending_ids, leading_key, number_or_none
from .order_service import payment_method

logger = logging.getLogger(__name__)

PAYMENT_METHODS = ("credit_card", "paypal", "bank_transfer")


def most_frequent(counts: Dict) -> Optional[object]:
    """Key with the highest count; the first key seen wins ties."""
    best = None
    for key, count in counts.items():
        if best is None or count > counts[best]:
            best = key
    return best


class UserService(ReportingService):
    """
    Reports scoped to a single user.

    Every operation raises ``ResourceNotFoundError`` when the user does
    not exist.
    """

    def _orders_of(self, user_id) -> List[Order]:
        return self.store.orders.filter(lambda o: same_id(o.user_id, user_id))

    def total_spent(self, user_id) -> UserTotalSpent:
        """Sum of the user's order amounts and the number of orders."""
        self._require(self.store.users, "user", user_id)
        orders = self._orders_of(user_id)

        total = sum(to_float(order.total_amount) for order in orders)

        return UserTotalSpent(user_id=user_id, orders_count=len(orders), total=round2(total))

    def order_history(self, user_id) -> UserOrderHistory:
        """
        The user's orders, total spent and favourite category.

        The favourite category is the one with the most purchased line
        items across all orders (one count per line item, not per unit).
        """
        user = self._require(self.store.users, "user", user_id)
        orders = self._orders_of(user_id)

        entries = [
            OrderHistoryEntry(
                id=order.id,
                total_amount=to_float(order.total_amount),
                status=order.status,
                payment_method=payment_method(order),
                created_at=order.created_at or None,
                items_count=len(order.items or []),
            )
            for order in orders
        ]

        category_counts: Dict[float, int] = {}
        for order in orders:
            for item in order.items or []:
                product = self.store.products.get(to_number(item.product_id))
                if product is None or not product.category_id:
                    continue
                category_id = to_number(product.category_id)
                category_counts[category_id] = category_counts.get(category_id, 0) + 1

        favorite_category = None
        if category_counts:
            favorite_category = self._category_name(most_frequent(category_counts), default=None)

        return UserOrderHistory(
            user_id=user_id,
            user_name=full_name(user),
            total_orders=len(orders),
            orders=entries,
            total_spent=round2(sum(to_float(order.total_amount) for order in orders)),
            favorite_category=favorite_category,
        )

    def reviews_history(self, user_id) -> UserReviewsHistory:
        """All reviews written by the user, newest first, with rating statistics."""
        user = self._require(self.store.users, "user", user_id)
        reviews = self.store.reviews.filter(lambda r: same_id(r.user_id, user_id))

        details = [
            UserReview(
                review_id=number_or_none(review.id),
                product_id=number_or_none(review.product_id),
                product_name=self._product_name(review.product_id),
                rating=number_or_none(review.rating),
                comment=review.comment or None,
                created_at=review.created_at,
            )
            for review in sorted(reviews, key=lambda r: -to_timestamp(r.created_at))
        ]

        return UserReviewsHistory(
            user_id=user_id,
            user_name=display_name(user),
            total_reviews=len(reviews),
            average_rating=average(to_float(review.rating) for review in reviews),
            reviews_by_product_count=len({to_number(review.product_id) for review in reviews}),
            reviews=details,
        )

    def purchase_summary(self, user_id) -> UserPurchaseSummary:
        """Total and average spending plus the most purchased category and product by units."""
        user = self._require(self.store.users, "user", user_id)
        orders = self._orders_of(user_id)

        total_spent = sum(to_float(order.total_amount) for order in orders)

        category_units: Dict[Optional[float], float] = {}
        product_units: Dict[Optional[float], float] = {}
        for order in orders:
            for item in order.items or []:
                product = self.store.products.get(to_number(item.product_id))
                if product is None:
                    continue
                quantity = to_float(item.quantity)
                category_id = to_number(product.category_id)
                product_id = to_number(product.id)
                category_units[category_id] = category_units.get(category_id, 0) + quantity
                product_units[product_id] = product_units.get(product_id, 0) + quantity

        most_purchased_category = None
        if category_units:
            best = most_frequent(category_units)
            category = self.store.categories.get(best)
            if category is not None:
                most_purchased_category = PurchasedCategory(
                    category_id=category.id,
                    category_name=category.name,
                    total_quantity=number_or_none(category_units[best]),
                )

        most_purchased_product = None
        if product_units:
            best = most_frequent(product_units)
            product = self.store.products.get(best)
            if product is not None:
                most_purchased_product = PurchasedProduct(
                    product_id=product.id,
                    product_name=product.name,
                    total_quantity=number_or_none(product_units[best]),
                )

        return UserPurchaseSummary(
            user_id=user_id,
            user_name=full_name(user),
            total_orders=len(orders),
            total_spent=round2(total_spent),
            average_order_value=round2(total_spent / len(orders)) if orders else 0,
            most_purchased_category=most_purchased_category,
            most_purchased_product=most_purchased_product,
        )

    def payment_methods_summary(self, user_id) -> UserPaymentMethodsSummary:
        """
        Usage and spending per payment method.

        Only orders that name a payment method are counted. Methods other
        than credit card, PayPal and bank transfer add to the totals but get
        no entry of their own. The preferred method is the most used one;
        ties go to the method listed later, so a user without paid orders
        prefers ``bank_transfer``.
        """
        user = self._require(self.store.users, "user", user_id)

        counts = {method: 0 for method in PAYMENT_METHODS}
        amounts = {method: 0.0 for method in PAYMENT_METHODS}
        total_orders = 0
        total_amount = 0.0
        for order in self._orders_of(user_id):
            method = payment_method(order)
            if not method:
                continue
            amount = to_float(order.total_amount)
            if method in counts:
                counts[method] += 1
                amounts[method] += amount
            total_orders += 1
            total_amount += amount

        usage = {
            method: PaymentMethodUsage(
                usage_count=counts[method],
                total_spent=round2(amounts[method]),
                average_order_value=round2(amounts[method] / counts[method]) if counts[method] else 0,
                usage_percentage=round2(counts[method] / total_orders * 100) if total_orders else 0,
            )
            for method in PAYMENT_METHODS
        }

        return UserPaymentMethodsSummary(
            user_id=user_id,
            user_name=display_name(user),
            total_orders=total_orders,
            total_amount=round2(total_amount),
            preferred_method=leading_key(counts, PAYMENT_METHODS),
            payment_methods=usage,
        )

    def activity(self, user_id) -> UserActivity:
        """
        Recent orders, most bought categories and last activity of a user.

        Categories are ranked by purchased line items; ties keep ascending
        category id order. ``lastActivity`` is null for users without orders.
        """
        user = self._require(self.store.users, "user", user_id)
        orders = self._orders_of(user_id)

        newest = sorted(orders, key=lambda o: -to_timestamp(o.created_at))
        recent_orders = [
            ActivityOrder(
                order_id=order.id,
                total_amount=to_float(order.total_amount),
                status=order.status,
                created_at=order.created_at or None,
            )
            for order in newest[:5]
        ]

        line_items: Dict[Optional[float], int] = {}
        for order in orders:
            for item in order.items or []:
                product = self.store.products.get(to_number(item.product_id))
                if product is None or not product.category_id:
                    continue
                category_id = to_number(product.category_id)
                line_items[category_id] = line_items.get(category_id, 0) + 1

        ranked = sorted(ascending_ids(line_items), key=lambda c: -line_items[c])
        top_categories = [
            CategoryActivity(
                category_id=to_int_or_float(category_id) if category_id is not None else None,
                category_name=self._category_name(category_id) or UNKNOWN,
                order_count=line_items[category_id],
            )
            for category_id in ranked[:3]
        ]

        last_activity = None
        if orders:
            last_activity = to_int_or_float(max(to_timestamp(order.created_at) for order in orders))

        return UserActivity(
            user_id=user_id,
            user_name=full_name(user),
            total_orders=len(orders),
            total_spent=round2(sum(to_float(order.total_amount) for order in orders)),
            recent_orders=recent_orders,
            top_categories=top_categories,
            last_activity=last_activity,
            is_active=bool(orders),
        )
