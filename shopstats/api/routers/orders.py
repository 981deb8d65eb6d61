"""
Order Endpoints
Recent orders feed, order statistics, order details and order search.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends

from ..dependencies import (
    get_limit,
    get_offset,
    get_order_service,
    get_search_service,
    parse_path_id,
)
from ..models import (
    ERROR_RESPONSES,
    OrderDetails,
    OrderSearchRequest,
    OrderStatistics,
    RecentOrders,
)
from ..services import OrderService, SearchService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("/recent", response_model=RecentOrders)
async def recent_orders(
    limit: int = Depends(get_limit(10)),
    offset: int = Depends(get_offset),
    service: OrderService = Depends(get_order_service),
) -> RecentOrders:
    """
    Orders sorted newest first, paginated.

    Args:
        limit: Page size (default 10)
        offset: Number of orders to skip (default 0)
    """
    return service.recent(limit=limit, offset=offset)


@router.get("/statistics", response_model=OrderStatistics)
async def order_statistics(service: OrderService = Depends(get_order_service)) -> OrderStatistics:
    """Revenue, order value extremes and status/payment distributions."""
    return service.statistics()


@router.post("/search", response_model=None, responses=ERROR_RESPONSES)
async def search_orders(
    request: Optional[OrderSearchRequest] = Body(None),
    search_service: SearchService = Depends(get_search_service),
):
    """
    Search orders by id, buyer or status.

    Returns a single order when searching by ``orderId`` matched exactly
    one record, otherwise a list.
    """
    return search_service.orders(request or OrderSearchRequest())


@router.get("/{id}/details", response_model=OrderDetails, responses=ERROR_RESPONSES)
async def order_details(
    order_id=Depends(parse_path_id),
    service: OrderService = Depends(get_order_service),
) -> OrderDetails:
    """An order with its buyer, payment and named line items."""
    return service.details(order_id)
