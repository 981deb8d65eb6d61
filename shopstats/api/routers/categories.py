"""
Category Endpoints
GET /categories/{id}/... - Per-category product, hierarchy, trend, review and sales reports.
POST /categories/search - Category search.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, status

from ..dependencies import get_category_service, get_limit, get_search_service, parse_path_id
from ..models import (
    ERROR_RESPONSES,
    CategoryProductsSummary,
    CategoryReviewsStatistics,
    CategorySalesStats,
    CategorySearchRequest,
    CategorySubcategories,
    CategoryTrendingProducts,
)
from ..services import CategoryService, SearchService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["categories"])


@router.post("/search", response_model=None, responses=ERROR_RESPONSES, status_code=status.HTTP_200_OK)
async def search_categories(
    request: Optional[CategorySearchRequest] = Body(None),
    search_service: SearchService = Depends(get_search_service),
):
    """
    Search categories by id, name (substring) or status.

    Returns a single category when searching by ``categoryId`` matched
    exactly one record, otherwise a list.
    """
    return search_service.categories(request or CategorySearchRequest())


@router.get(
    "/{id}/products-summary",
    response_model=CategoryProductsSummary,
    responses=ERROR_RESPONSES,
)
async def products_summary(
    category_id=Depends(parse_path_id),
    service: CategoryService = Depends(get_category_service),
) -> CategoryProductsSummary:
    """Product count, active count, stock and price statistics of a category."""
    return service.products_summary(category_id)


@router.get(
    "/{id}/subcategories",
    response_model=CategorySubcategories,
    responses=ERROR_RESPONSES,
)
async def subcategories(
    category_id=Depends(parse_path_id),
    service: CategoryService = Depends(get_category_service),
) -> CategorySubcategories:
    """Direct subcategories with their product counts."""
    return service.subcategories(category_id)


@router.get(
    "/{id}/trending-products",
    response_model=CategoryTrendingProducts,
    responses=ERROR_RESPONSES,
)
async def trending_products(
    category_id=Depends(parse_path_id),
    limit: int = Depends(get_limit(10)),
    service: CategoryService = Depends(get_category_service),
) -> CategoryTrendingProducts:
    """
    Best-selling products of a category over the trending window.

    Args:
        category_id: Category id
        limit: Maximum number of products (default 10)
    """
    return service.trending_products(category_id, limit=limit)


@router.get(
    "/{id}/reviews-statistics",
    response_model=CategoryReviewsStatistics,
    responses=ERROR_RESPONSES,
)
async def reviews_statistics(
    category_id=Depends(parse_path_id),
    service: CategoryService = Depends(get_category_service),
) -> CategoryReviewsStatistics:
    """Review totals of a category and its 5 most reviewed products."""
    return service.reviews_statistics(category_id)


@router.get(
    "/{id}/sales-stats",
    response_model=CategorySalesStats,
    responses=ERROR_RESPONSES,
)
async def sales_stats(
    category_id=Depends(parse_path_id),
    service: CategoryService = Depends(get_category_service),
) -> CategorySalesStats:
    """All-time units and revenue of a category, with its 5 best sellers."""
    return service.sales_stats(category_id)
