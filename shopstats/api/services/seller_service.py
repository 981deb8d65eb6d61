"""
Seller Service
Catalog, sales and revenue reports for one seller.
"""

import logging
from typing import Dict, List, Optional

from ...analytics import (
    UNKNOWN,
    average,
    full_name,
    round2,
    same_id,
    to_float,
    to_int_or_float,
    to_month,
    to_number,
)
from ...db import Product, User
from ..models import ProductSales, SellerAnalytics, SellerCategoryCount, SellerDashboard
from .base import ReportingService, ascending_ids, leading_key

logger = logging.getLogger(__name__)


class SellerService(ReportingService):
    """
    Reports scoped to a single seller.

    Sellers are users; their products are the ones whose ``sellerId``
    points at them. Every operation raises ``ResourceNotFoundError`` when
    no user has the seller id.
    """

    def _seller(self, seller_id) -> User:
        return self._require(self.store.users, "seller", seller_id)

    def _products_of(self, seller_id) -> List[Product]:
        return self.store.products.filter(lambda p: same_id(p.seller_id, seller_id))

    def _category_counts(self, products: List[Product]) -> Dict[Optional[float], int]:
        """Products per category id, ascending id order, unknown ids last."""
        counts: Dict[Optional[float], int] = {}
        for product in products:
            category_id = to_number(product.category_id)
            counts[category_id] = counts.get(category_id, 0) + 1
        return {category_id: counts[category_id] for category_id in ascending_ids(counts)}

    def _category_entry(self, category_id, product_count: int) -> SellerCategoryCount:
        return SellerCategoryCount(
            category_id=to_int_or_float(category_id) if category_id is not None else None,
            category_name=self._category_name(category_id) or UNKNOWN,
            product_count=product_count,
        )

    def dashboard(self, seller_id) -> SellerDashboard:
        """
        Catalog size, all-time sales and the five best-selling products.

        Sales count every order line of the seller's products. Products are
        ranked by units sold; ties keep ascending product id order.
        """
        seller = self._seller(seller_id)
        products = self._products_of(seller_id)

        sales = self._sales_by_product(self.store.orders, self._product_ids(products))

        top_selling = [
            ProductSales(
                product_id=to_int_or_float(product_id),
                product_name=self._product_name(product_id),
                sales_count=to_int_or_float(entry["sales_count"]),
                revenue=round2(entry["revenue"]),
            )
            for product_id, entry in self._rank_by_sales(sales)[:5]
        ]

        by_category = [
            self._category_entry(category_id, count)
            for category_id, count in self._category_counts(products).items()
        ]

        return SellerDashboard(
            seller_id=seller_id,
            seller_name=full_name(seller),
            total_products=len(products),
            active_products=sum(1 for p in products if p.status == "active"),
            total_sales=to_int_or_float(sum(entry["sales_count"] for entry in sales.values())),
            total_revenue=round2(sum(entry["revenue"] for entry in sales.values())),
            top_selling_products=top_selling,
            products_by_category=by_category,
        )

    def analytics(self, seller_id) -> SellerAnalytics:
        """
        Sales, pricing, stock, leading category and revenue per month.

        Monthly revenue buckets order lines by the UTC month of their
        order's ``createdAt``; undated orders count toward the totals only.
        The leading category is the one holding the most products, ties
        going to the higher category id.
        """
        seller = self._seller(seller_id)
        products = self._products_of(seller_id)
        product_ids = self._product_ids(products)

        total_sales = 0.0
        total_revenue = 0.0
        monthly: Dict[str, float] = {}
        for order in self.store.orders:
            month = to_month(order.created_at) if order.created_at else None
            for item in order.items or []:
                if to_number(item.product_id) not in product_ids:
                    continue
                quantity = to_float(item.quantity)
                revenue = quantity * to_float(item.price)
                total_sales += quantity
                total_revenue += revenue
                if month is not None:
                    monthly[month] = monthly.get(month, 0.0) + revenue

        category_counts = self._category_counts(products)
        top_category = None
        if category_counts:
            leader = leading_key(category_counts, list(category_counts))
            top_category = self._category_entry(leader, category_counts[leader])

        logger.debug(
            f"Seller {seller_id} analytics over {len(products)} products",
            extra={"months": len(monthly)},
        )

        return SellerAnalytics(
            seller_id=seller_id,
            seller_name=full_name(seller),
            total_products=len(products),
            active_products=sum(1 for p in products if p.status == "active"),
            total_sales=to_int_or_float(total_sales),
            total_revenue=round2(total_revenue),
            average_product_price=average(
                price for price in (to_float(p.price) for p in products) if price > 0
            ),
            total_stock=to_int_or_float(sum(to_float(p.stock) for p in products)),
            top_category=top_category,
            monthly_revenue={month: round2(revenue) for month, revenue in monthly.items()},
        )
