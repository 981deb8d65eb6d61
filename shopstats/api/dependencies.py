"""
Dependency Injection
FastAPI dependencies for the dataset, services and request parameters.
"""

import logging
from typing import Optional

from fastapi import Depends, Path, Query

from ..analytics import to_int_or_float, to_number
from ..db import DataStore, get_data_store
from .config import APISettings, get_settings
from .errors import InvalidRequestError
from .services import (
    CategoryService,
    OrderService,
    ProductService,
    SearchService,
    SellerService,
    UserService,
)

logger = logging.getLogger(__name__)


def get_store() -> DataStore:
    """
    Get the dataset.

    Use as FastAPI dependency (override in tests with
    ``app.dependency_overrides[get_store]``):
        @app.get("/endpoint")
        def endpoint(store: DataStore = Depends(get_store)):
            ...
    """
    return get_data_store()


def get_category_service(
    store: DataStore = Depends(get_store),
    settings: APISettings = Depends(get_settings),
) -> CategoryService:
    """Category reporting service bound to the current dataset."""
    return CategoryService(store, trending_window_days=settings.trending_window_days)


def get_product_service(store: DataStore = Depends(get_store)) -> ProductService:
    """Product reporting service bound to the current dataset."""
    return ProductService(store)


def get_order_service(store: DataStore = Depends(get_store)) -> OrderService:
    """Order reporting service bound to the current dataset."""
    return OrderService(store)


def get_user_service(store: DataStore = Depends(get_store)) -> UserService:
    """User reporting service bound to the current dataset."""
    return UserService(store)


def get_search_service(store: DataStore = Depends(get_store)) -> SearchService:
    """Search service bound to the current dataset."""
    return SearchService(store)


def get_seller_service(store: DataStore = Depends(get_store)) -> SellerService:
    """Seller reporting service bound to the current dataset."""
    return SellerService(store)


def parse_path_id(id: str = Path(..., description="Numeric entity id", examples=[1])):
    """
    Parse the ``{id}`` path parameter.

    A blank id reads as 0 and is looked up like any other id.

    Raises:
        InvalidRequestError: If the id is not a finite number
    """
    if not id.strip():
        return 0
    number = to_number(id)
    if number is None:
        raise InvalidRequestError("invalid id", details={"id": id})
    return to_int_or_float(number)


def parse_seller_id(
    sellerId: str = Path(..., description="Numeric user id of the seller", examples=[1])
):
    """
    Parse the ``{sellerId}`` path parameter.

    Raises:
        InvalidRequestError: If the id is not a finite number
    """
    if not sellerId.strip():
        return 0
    number = to_number(sellerId)
    if number is None:
        raise InvalidRequestError("invalid seller id", details={"sellerId": sellerId})
    return to_int_or_float(number)


def parse_count(value: Optional[str], default: int) -> int:
    """
    Parse a ``limit``/``offset`` query value.

    Missing, non-numeric, non-finite and zero values fall back to
    ``default``; fractions truncate toward zero.
    """
    number = to_number(value)
    if not number:
        return default
    return int(number)


def get_limit(default: int):
    """Build a dependency for an optional ``limit`` query parameter."""

    def dependency(
        limit: Optional[str] = Query(None, description=f"Maximum number of results (default {default})")
    ) -> int:
        return parse_count(limit, default)

    return dependency


def get_offset(
    offset: Optional[str] = Query(None, description="Number of results to skip (default 0)")
) -> int:
    """Optional ``offset`` query parameter."""
    return parse_count(offset, 0)


def get_threshold(
    threshold: Optional[str] = Query(None, description="Maximum total stock (default 10)")
) -> float:
    """
    Parse the low-stock ``threshold`` query parameter.

    Raises:
        InvalidRequestError: If the value is not a finite, non-negative number
    """
    if threshold is None or not threshold.strip():
        return 10
    number = to_number(threshold)
    if number is None or number < 0:
        raise InvalidRequestError("invalid threshold", details={"threshold": threshold})
    return to_int_or_float(number)


def get_category_filter(
    categoryId: Optional[str] = Query(None, description="Restrict to one category")
):
    """
    Parse the optional ``categoryId`` query parameter.

    A blank value restricts the report to category 0.

    Raises:
        InvalidRequestError: If the value is present but not a finite number
    """
    if not categoryId:
        return None
    if not categoryId.strip():
        return 0
    number = to_number(categoryId)
    if number is None:
        raise InvalidRequestError("invalid categoryId", details={"categoryId": categoryId})
    return to_int_or_float(number)

