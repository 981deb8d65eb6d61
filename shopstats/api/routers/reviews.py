"""
Review Endpoints
POST /reviews/search - Review search.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends

from ..dependencies import get_search_service
from ..models import ERROR_RESPONSES, ReviewSearchRequest
from ..services import SearchService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.post("/search", response_model=None, responses=ERROR_RESPONSES)
async def search_reviews(
    request: Optional[ReviewSearchRequest] = Body(None),
    search_service: SearchService = Depends(get_search_service),
):
    """
    Search reviews by id, product, reviewer or rating.

    Returns a single review when ``reviewId``, or both ``productId`` and
    ``userId``, matched exactly one record; otherwise a list.
    """
    return search_service.reviews(request or ReviewSearchRequest())
