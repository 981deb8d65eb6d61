"""
Category Service
Product, hierarchy, trend, review and sales reports for one category.
"""

import logging
import time
from typing import Dict, Optional

from ...analytics import (
    UNKNOWN,
    average,
    round2,
    same_id,
    to_float,
    to_int_or_float,
    to_number,
    to_timestamp,
)
from ...db import DataStore
from ..models import (
    CategoryProductsSummary,
    CategoryReviewsStatistics,
    CategorySalesStats,
    CategorySubcategories,
    CategoryTrendingProducts,
    PriceRange,
    ProductReviewStats,
    ProductSales,
    SubcategorySummary,
    TrendingProduct,
)
from .base import ReportingService

logger = logging.getLogger(__name__)

DAY_MS = 24 * 60 * 60 * 1000


class CategoryService(ReportingService):
    """
    Reports scoped to a single category.

    Every operation raises ``ResourceNotFoundError`` when the category
    does not exist.
    """

    def __init__(self, store: DataStore, trending_window_days: int = 7):
        """
        Initialize category service.

        Args:
            store: Read-only dataset
            trending_window_days: Length of the trending-products window
        """
        super().__init__(store)
        self.trending_window_days = trending_window_days

    def products_summary(self, category_id) -> CategoryProductsSummary:
        """
        Count, stock and price statistics of the category's products.

        Average, min and max are taken over positive prices only.
        """
        category = self._require(self.store.categories, "category", category_id)
        products = self._products_in_category(category_id)

        prices = [price for price in (to_float(p.price) for p in products) if price > 0]

        return CategoryProductsSummary(
            category_id=category_id,
            category_name=category.name,
            total_products=len(products),
            active_products=sum(1 for p in products if p.status == "active"),
            total_stock=to_int_or_float(sum(to_float(p.stock) for p in products)),
            average_price=average(prices),
            price_range=PriceRange(
                min=round2(min(prices)) if prices else 0,
                max=round2(max(prices)) if prices else 0,
            ),
        )

    def subcategories(self, category_id) -> CategorySubcategories:
        """
        Direct children of the category with their product counts.

        Only one level is resolved; ``depth`` is 1 when children exist.
        """
        category = self._require(self.store.categories, "category", category_id)

        children = self.store.categories.filter(
            lambda c: c.parent_id is not None and same_id(c.parent_id, category_id)
        )

        summaries = [
            SubcategorySummary(
                id=child.id,
                name=child.name,
                description=child.description,
                status=child.status,
                product_count=len(self._products_in_category(to_number(child.id))),
            )
            for child in children
        ]

        total_products = len(self._products_in_category(category_id))
        total_products += sum(summary.product_count for summary in summaries)

        return CategorySubcategories(
            category_id=category_id,
            category_name=category.name,
            parent_id=category.parent_id,
            subcategories=summaries,
            total_products=total_products,
            depth=1 if children else 0,
        )

    def trending_products(
        self, category_id, limit: int = 10, now_ms: Optional[float] = None
    ) -> CategoryTrendingProducts:
        """
        Best-selling products of the category inside the trending window.

        Args:
            category_id: Category id
            limit: Maximum number of products to return
            now_ms: Window end in epoch millis (defaults to the current time)
        """
        category = self._require(self.store.categories, "category", category_id)
        product_ids = self._product_ids(self._products_in_category(category_id))

        if now_ms is None:
            now_ms = time.time() * 1000
        window_start = now_ms - self.trending_window_days * DAY_MS

        recent_orders = [
            order for order in self.store.orders
            if to_timestamp(order.created_at) >= window_start
        ]
        sales = self._sales_by_product(recent_orders, product_ids)

        trending = []
        for product_id, entry in self._rank_by_sales(sales)[:limit]:
            product = self.store.products.get(product_id)
            trending.append(
                TrendingProduct(
                    product_id=to_int_or_float(product_id),
                    product_name=product.name if product else UNKNOWN,
                    sales_count=to_int_or_float(entry["sales_count"]),
                    revenue=round2(entry["revenue"]),
                    price=to_float(product.price) if product else 0,
                    status=product.status if product else "unknown",
                )
            )

        logger.debug(
            f"Trending products for category {category_id}: {len(trending)}",
            extra={"window_start": window_start, "orders_in_window": len(recent_orders)},
        )

        return CategoryTrendingProducts(
            category_id=category_id,
            category_name=category.name,
            period=f"{self.trending_window_days} days",
            trending_products=trending,
            total_trending_products=len(trending),
        )

    def reviews_statistics(self, category_id) -> CategoryReviewsStatistics:
        """Review count and average across the category, plus its 5 most reviewed products."""
        category = self._require(self.store.categories, "category", category_id)
        products = self._products_in_category(category_id)
        product_ids = self._product_ids(products)

        reviews = self.store.reviews.filter(lambda r: to_number(r.product_id) in product_ids)

        total_rating = 0.0
        per_product: Dict[float, Dict[str, float]] = {}
        for review in reviews:
            rating = to_float(review.rating)
            total_rating += rating
            entry = per_product.setdefault(
                to_number(review.product_id), {"total_reviews": 0, "total_rating": 0.0}
            )
            entry["total_reviews"] += 1
            entry["total_rating"] += rating

        stats = []
        for product_id, entry in sorted(per_product.items()):
            product = next((p for p in products if same_id(p.id, product_id)), None)
            stats.append(
                ProductReviewStats(
                    product_id=to_int_or_float(product_id),
                    product_name=product.name if product else UNKNOWN,
                    total_reviews=entry["total_reviews"],
                    average_rating=round2(entry["total_rating"] / entry["total_reviews"]),
                )
            )
        stats.sort(key=lambda s: -s.total_reviews)

        return CategoryReviewsStatistics(
            category_id=category_id,
            category_name=category.name,
            total_products=len(products),
            total_reviews=len(reviews),
            average_rating=round2(total_rating / len(reviews)) if reviews else 0,
            products_with_reviews=len(per_product),
            top_reviewed_products=stats[:5],
        )

    def sales_stats(self, category_id) -> CategorySalesStats:
        """
        All-time units and revenue of the category's products.

        ``averageOrderValue`` divides the category revenue by the number of
        all orders, not only the ones containing category products.
        """
        category = self._require(self.store.categories, "category", category_id)
        products = self._products_in_category(category_id)

        orders = self.store.orders.all()
        sales = self._sales_by_product(orders, self._product_ids(products))

        total_sales = sum(entry["sales_count"] for entry in sales.values())
        total_revenue = sum(entry["revenue"] for entry in sales.values())

        top_selling = [
            ProductSales(
                product_id=to_int_or_float(product_id),
                product_name=self._product_name(product_id),
                sales_count=to_int_or_float(entry["sales_count"]),
                revenue=round2(entry["revenue"]),
            )
            for product_id, entry in self._rank_by_sales(sales)[:5]
        ]

        return CategorySalesStats(
            category_id=category_id,
            category_name=category.name,
            total_products=len(products),
            total_sales=to_int_or_float(total_sales),
            total_revenue=round2(total_revenue),
            average_order_value=round2(total_revenue / len(orders)) if orders else 0,
            top_selling_products=top_selling,
        )

