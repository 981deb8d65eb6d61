"""
Seller Endpoints
Dashboard and analytics reports for sellers.
"""

import logging

from fastapi import APIRouter, Depends

from ..dependencies import get_seller_service, parse_seller_id
from ..models import ERROR_RESPONSES, SellerAnalytics, SellerDashboard
from ..services import SellerService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sellers", tags=["sellers"])


@router.get("/{sellerId}/dashboard", response_model=SellerDashboard, responses=ERROR_RESPONSES)
async def seller_dashboard(
    seller_id=Depends(parse_seller_id),
    service: SellerService = Depends(get_seller_service),
) -> SellerDashboard:
    """Product counts, sales totals, best sellers and category spread of a seller."""
    return service.dashboard(seller_id)


@router.get("/{sellerId}/analytics", response_model=SellerAnalytics, responses=ERROR_RESPONSES)
async def seller_analytics(
    seller_id=Depends(parse_seller_id),
    service: SellerService = Depends(get_seller_service),
) -> SellerAnalytics:
    """
    Sales, average price, stock, leading category and monthly revenue of a seller.

    Months are UTC ``YYYY-MM`` keys in order of first appearance.
    """
    return service.analytics(seller_id)
