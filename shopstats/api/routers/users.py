"""
User Endpoints
Per-user spending, order, review, purchase, payment and activity reports, and user search.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends

from ..dependencies import get_search_service, get_user_service, parse_path_id
from ..models import (
    ERROR_RESPONSES,
    UserActivity,
    UserOrderHistory,
    UserPaymentMethodsSummary,
    UserPurchaseSummary,
    UserReviewsHistory,
    UserSearchRequest,
    UserTotalSpent,
)
from ..services import SearchService, UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/search", response_model=None, responses=ERROR_RESPONSES)
async def search_users(
    request: Optional[UserSearchRequest] = Body(None),
    search_service: SearchService = Depends(get_search_service),
):
    """
    Search users by email (exact) or first/last name (substring).

    Returns a single user when searching by ``email`` matched exactly one
    record, otherwise a list.
    """
    return search_service.users(request or UserSearchRequest())


@router.get("/{id}/total-spent", response_model=UserTotalSpent, responses=ERROR_RESPONSES)
async def total_spent(
    user_id=Depends(parse_path_id),
    service: UserService = Depends(get_user_service),
) -> UserTotalSpent:
    """Total amount spent and number of orders of a user."""
    return service.total_spent(user_id)


@router.get("/{id}/order-history", response_model=UserOrderHistory, responses=ERROR_RESPONSES)
async def order_history(
    user_id=Depends(parse_path_id),
    service: UserService = Depends(get_user_service),
) -> UserOrderHistory:
    """A user's orders, total spent and favourite category."""
    return service.order_history(user_id)


@router.get("/{id}/reviews-history", response_model=UserReviewsHistory, responses=ERROR_RESPONSES)
async def reviews_history(
    user_id=Depends(parse_path_id),
    service: UserService = Depends(get_user_service),
) -> UserReviewsHistory:
    """A user's reviews, newest first, with average rating."""
    return service.reviews_history(user_id)


@router.get("/{id}/purchase-summary", response_model=UserPurchaseSummary, responses=ERROR_RESPONSES)
async def purchase_summary(
    user_id=Depends(parse_path_id),
    service: UserService = Depends(get_user_service),
) -> UserPurchaseSummary:
    """Spending plus the most purchased category and product of a user."""
    return service.purchase_summary(user_id)


@router.get(
    "/{id}/payment-methods-summary",
    response_model=UserPaymentMethodsSummary,
    responses=ERROR_RESPONSES,
)
async def payment_methods_summary(
    user_id=Depends(parse_path_id),
    service: UserService = Depends(get_user_service),
) -> UserPaymentMethodsSummary:
    """Usage count, spending and share of each payment method of a user."""
    return service.payment_methods_summary(user_id)


@router.get("/{id}/activity", response_model=UserActivity, responses=ERROR_RESPONSES)
async def activity(
    user_id=Depends(parse_path_id),
    service: UserService = Depends(get_user_service),
) -> UserActivity:
    """A user's five newest orders, top three categories and last activity."""
    return service.activity(user_id)
