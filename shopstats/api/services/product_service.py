"""
Product Service
Inventory, review, recommendation and sales reports for products.
"""

import logging
from typing import Dict, List

from ...analytics import (
    UNKNOWN,
    display_name,
    round2,
    same_id,
    to_float,
    to_int_or_float,
    to_number,
    to_timestamp,
)
from ...db import Product, Review
from ..models import (
    LowStockProduct,
    LowStockReport,
    PriceRange,
    ProductRecommendations,
    ProductReviewsSummary,
    ProductSalesStats,
    ProductVariantsSummary,
    RecentReview,
    Recommendation,
    TopReviewedProduct,
    TopReviewedProducts,
    VariantSummary,
)
from .base import ReportingService, number_or_none

logger = logging.getLogger(__name__)

RATING_BUCKETS = ("1", "2", "3", "4", "5")


def variant_stock(product: Product) -> float:
    """Sum of the stock of every variant of ``product``."""
    return sum(to_float(variant.stock) for variant in product.variants or [])


def newest_first(reviews: List[Review]) -> List[Review]:
    """Reviews sorted by ``createdAt`` descending (missing dates last)."""
    return sorted(reviews, key=lambda r: -to_timestamp(r.created_at))


class ProductService(ReportingService):
    """Reports over the product catalog."""

    def low_stock(self, threshold=10, category_id=None) -> LowStockReport:
        """
        Products whose main plus variant stock is at or below ``threshold``.

        Args:
            threshold: Inclusive stock limit (validated by the caller)
            category_id: Optional category restriction

        Returns:
            Matching products, lowest total stock first
        """
        products = self.store.products.all()
        if category_id is not None:
            products = [p for p in products if same_id(p.category_id, category_id)]

        alerts = []
        for product in products:
            main_stock = to_float(product.stock)
            variants_total = variant_stock(product)
            total_stock = main_stock + variants_total
            if total_stock > threshold:
                continue

            alerts.append(
                LowStockProduct(
                    product_id=product.id,
                    product_name=product.name,
                    category_id=product.category_id,
                    category_name=self._category_name(product.category_id) or UNKNOWN,
                    main_stock=to_int_or_float(main_stock),
                    variant_stock=to_int_or_float(variants_total),
                    total_stock=to_int_or_float(total_stock),
                    status=product.status,
                    price=to_float(product.price),
                )
            )

        alerts.sort(key=lambda alert: alert.total_stock)

        if alerts:
            logger.info(
                f"{len(alerts)} products at or below stock threshold {threshold}",
                extra={"category_id": category_id},
            )

        return LowStockReport(
            threshold=threshold,
            category_id=category_id or None,
            total_low_stock_products=len(alerts),
            products=alerts,
        )

    def reviews_summary(self, product_id) -> ProductReviewsSummary:
        """
        Review count, average rating, 1-5 distribution and 5 newest reviews.

        Ratings outside 1-5 count towards ``totalReviews`` (and the
        average's denominator) but not towards the rating sum or the
        distribution.
        """
        product = self._require(self.store.products, "product", product_id)
        reviews = self.store.reviews.filter(lambda r: same_id(r.product_id, product_id))

        total_rating = 0.0
        distribution: Dict[str, int] = {bucket: 0 for bucket in RATING_BUCKETS}
        for review in reviews:
            rating = to_float(review.rating)
            if 1 <= rating <= 5:
                total_rating += rating
                if rating.is_integer():
                    distribution[str(int(rating))] += 1

        recent = [
            RecentReview(
                review_id=number_or_none(review.id),
                user_id=number_or_none(review.user_id),
                user_name=display_name(self.store.users.get(to_number(review.user_id))),
                rating=number_or_none(review.rating),
                comment=review.comment or None,
                created_at=review.created_at,
            )
            for review in newest_first(reviews)[:5]
        ]

        return ProductReviewsSummary(
            product_id=product_id,
            product_name=product.name,
            total_reviews=len(reviews),
            average_rating=round2(total_rating / len(reviews)) if reviews else 0,
            rating_distribution=distribution,
            recent_reviews=recent,
        )

    def recommendations(self, product_id, limit: int = 5) -> ProductRecommendations:
        """
        Other active products of the same category, closest price first.

        The source product itself is never recommended.
        """
        product = self._require(self.store.products, "product", product_id)
        category_id = to_number(product.category_id)
        price = to_float(product.price)

        candidates = self.store.products.filter(
            lambda p: not same_id(p.id, product_id)
            and same_id(p.category_id, category_id)
            and p.status == "active"
        )
        candidates.sort(key=lambda p: abs(to_float(p.price) - price))

        recommendations = [
            Recommendation(
                product_id=candidate.id,
                product_name=candidate.name,
                price=to_float(candidate.price),
                stock=to_int_or_float(to_float(candidate.stock)),
                status=candidate.status,
                tags=candidate.tags or [],
            )
            for candidate in candidates[:limit]
        ]

        return ProductRecommendations(
            product_id=product.id,
            product_name=product.name,
            category_id=to_int_or_float(category_id) if category_id is not None else None,
            recommendations=recommendations,
            total_recommendations=len(recommendations),
        )

    def sales_stats(self, product_id) -> ProductSalesStats:
        """
        Units, revenue and order count of a product over all orders.

        An order with several matching line items adds all of them to the
        totals but counts once in ``ordersCount``.
        """
        product = self._require(self.store.products, "product", product_id)

        total_sales = 0.0
        total_revenue = 0.0
        orders_count = 0
        for order in self.store.orders:
            items = [item for item in order.items or [] if same_id(item.product_id, product_id)]
            if not items:
                continue
            orders_count += 1
            for item in items:
                quantity = to_float(item.quantity)
                total_sales += quantity
                total_revenue += quantity * to_float(item.price)

        return ProductSalesStats(
            product_id=product_id,
            product_name=product.name,
            total_sales=to_int_or_float(total_sales),
            total_revenue=round2(total_revenue),
            orders_count=orders_count,
            average_order_value=round2(total_revenue / orders_count) if orders_count else 0,
        )

    def top_reviewed(self, limit: int = 10) -> TopReviewedProducts:
        """
        Reviewed products ranked by review count, then average rating.

        Products without reviews are left out.
        """
        reviews = self.store.reviews.all()

        stats: Dict[float, TopReviewedProduct] = {}
        for product in self.store.products:
            product_id = to_number(product.id)
            if product_id is None:
                continue
            product_reviews = [r for r in reviews if same_id(r.product_id, product_id)]
            if not product_reviews:
                continue

            total_rating = sum(to_float(r.rating) for r in product_reviews)
            stats[product_id] = TopReviewedProduct(
                product_id=to_int_or_float(product_id),
                product_name=product.name,
                category_id=number_or_none(product.category_id),
                total_reviews=len(product_reviews),
                average_rating=round2(total_rating / len(product_reviews)),
                latest_review_date=to_int_or_float(
                    max(to_timestamp(r.created_at) for r in product_reviews)
                ),
            )

        ranked = [entry for _, entry in sorted(stats.items())]
        ranked.sort(key=lambda entry: (-entry.total_reviews, -entry.average_rating))
        ranked = ranked[:limit]

        for entry in ranked:
            entry.category_name = self._category_name(entry.category_id)

        return TopReviewedProducts(
            total_products=len(ranked),
            limit=limit,
            top_reviewed_products=ranked,
        )

    def variants_summary(self, product_id) -> ProductVariantsSummary:
        """Stock, availability, price range and colour/size breakdown of a product's variants."""
        product = self._require(self.store.products, "product", product_id)
        variants = product.variants or []

        prices = [price for price in (to_float(v.price) for v in variants) if price > 0]

        color_distribution: Dict[str, int] = {}
        size_distribution: Dict[str, int] = {}
        summaries = []
        for variant in variants:
            stock = to_float(variant.stock)
            if variant.color:
                color_distribution[variant.color] = color_distribution.get(variant.color, 0) + 1
            if variant.size:
                size_distribution[variant.size] = size_distribution.get(variant.size, 0) + 1
            summaries.append(
                VariantSummary(
                    id=variant.id,
                    color=variant.color,
                    size=variant.size,
                    price=to_float(variant.price),
                    stock=to_int_or_float(stock),
                    is_available=stock > 0,
                )
            )

        return ProductVariantsSummary(
            product_id=product.id,
            product_name=product.name,
            total_variants=len(variants),
            total_variant_stock=to_int_or_float(variant_stock(product)),
            available_variants=sum(1 for s in summaries if s.is_available),
            out_of_stock_variants=sum(1 for s in summaries if s.stock == 0),
            variant_price_range=PriceRange(
                min=round2(min(prices)) if prices else 0,
                max=round2(max(prices)) if prices else 0,
            ),
            color_distribution=color_distribution,
            size_distribution=size_distribution,
            variants=summaries,
        )
