"""
Product Endpoints
Inventory alerts, top-reviewed ranking and per-product reports.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends

from ..dependencies import (
    get_category_filter,
    get_limit,
    get_product_service,
    get_search_service,
    get_threshold,
    parse_path_id,
)
from ..models import (
    ERROR_RESPONSES,
    LowStockReport,
    ProductRecommendations,
    ProductReviewsSummary,
    ProductSalesStats,
    ProductSearchRequest,
    ProductVariantsSummary,
    TopReviewedProducts,
)
from ..services import ProductService, SearchService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])


@router.get("/low-stock", response_model=LowStockReport, responses=ERROR_RESPONSES)
async def low_stock(
    threshold=Depends(get_threshold),
    category_id=Depends(get_category_filter),
    service: ProductService = Depends(get_product_service),
) -> LowStockReport:
    """
    Products whose main plus variant stock is at or below ``threshold``.

    Args:
        threshold: Inclusive stock limit (default 10)
        category_id: Optional category restriction (``categoryId`` query parameter)
    """
    return service.low_stock(threshold=threshold, category_id=category_id)


@router.get("/top-reviewed", response_model=TopReviewedProducts)
async def top_reviewed(
    limit: int = Depends(get_limit(10)),
    service: ProductService = Depends(get_product_service),
) -> TopReviewedProducts:
    """Products ranked by review count, then by average rating."""
    return service.top_reviewed(limit=limit)


@router.post("/search", response_model=None, responses=ERROR_RESPONSES)
async def search_products(
    request: Optional[ProductSearchRequest] = Body(None),
    search_service: SearchService = Depends(get_search_service),
):
    """
    Search products by id, name (substring) or category.

    Returns a single product when searching by ``productId`` matched
    exactly one record, otherwise a list.
    """
    return search_service.products(request or ProductSearchRequest())


@router.get("/{id}/reviews-summary", response_model=ProductReviewsSummary, responses=ERROR_RESPONSES)
async def reviews_summary(
    product_id=Depends(parse_path_id),
    service: ProductService = Depends(get_product_service),
) -> ProductReviewsSummary:
    """Review count, average, rating distribution and latest reviews of a product."""
    return service.reviews_summary(product_id)


@router.get("/{id}/recommendations", response_model=ProductRecommendations, responses=ERROR_RESPONSES)
async def recommendations(
    product_id=Depends(parse_path_id),
    limit: int = Depends(get_limit(5)),
    service: ProductService = Depends(get_product_service),
) -> ProductRecommendations:
    """Active products of the same category, closest price first."""
    return service.recommendations(product_id, limit=limit)


@router.get("/{id}/sales-stats", response_model=ProductSalesStats, responses=ERROR_RESPONSES)
async def sales_stats(
    product_id=Depends(parse_path_id),
    service: ProductService = Depends(get_product_service),
) -> ProductSalesStats:
    """Units sold, revenue and number of orders of a product."""
    return service.sales_stats(product_id)


@router.get("/{id}/variants-summary", response_model=ProductVariantsSummary, responses=ERROR_RESPONSES)
async def variants_summary(
    product_id=Depends(parse_path_id),
    service: ProductService = Depends(get_product_service),
) -> ProductVariantsSummary:
    """Stock, availability and colour/size breakdown of a product's variants."""
    return service.variants_summary(product_id)
