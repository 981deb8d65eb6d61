"""
Search Service
Conjunctive field search over each collection.
"""

import logging
from typing import Any, Dict, List, Union

from ...analytics import FilterOperator, SearchCriteria, has_any_value
from ...db import CollectionRepository
from ..errors import EmptySearchCriteriaError, NoMatchesError
from ..models import (
    CategorySearchRequest,
    OrderSearchRequest,
    ProductSearchRequest,
    ReviewSearchRequest,
    UserSearchRequest,
)
from .base import ReportingService

logger = logging.getLogger(__name__)

SearchResult = Union[Dict[str, Any], List[Dict[str, Any]]]


class SearchService(ReportingService):
    """
    Search endpoints backend.

    Each search requires at least one non-empty field, ANDs every supplied
    field, and returns a single record when a unique key matched exactly
    one record, or the list of matches otherwise.
    """

    def _run(
        self,
        repository: CollectionRepository,
        criteria: SearchCriteria,
        values: List[Any],
        resources: str,
    ) -> SearchResult:
        """
        Execute a search.

        Raises:
            EmptySearchCriteriaError: If no field carries a value
            NoMatchesError: If no record satisfies every filter
        """
        if not has_any_value(values):
            raise EmptySearchCriteriaError()

        matched = criteria.apply(repository)
        if not matched:
            raise NoMatchesError(resources)

        logger.info(
            f"Search on {repository.name} returned {len(matched)} records",
            extra={"fields": criteria.supplied},
        )

        if criteria.identifies_single(matched):
            return matched[0].to_dict()
        return [record.to_dict() for record in matched]

    def categories(self, request: CategorySearchRequest) -> SearchResult:
        criteria = SearchCriteria(unique_keys=[("categoryId",)])
        criteria.add("categoryId", "id", FilterOperator.NUMBER_EQ, request.category_id)
        criteria.add("name", "name", FilterOperator.ICONTAINS, request.name)
        criteria.add("status", "status", FilterOperator.IEQ, request.status)
        return self._run(
            self.store.categories,
            criteria,
            [request.category_id, request.name, request.status],
            "categories",
        )

    def orders(self, request: OrderSearchRequest) -> SearchResult:
        criteria = SearchCriteria(unique_keys=[("orderId",)])
        criteria.add("orderId", "id", FilterOperator.NUMBER_EQ, request.order_id)
        criteria.add("userId", "user_id", FilterOperator.NUMBER_EQ, request.user_id)
        criteria.add("status", "status", FilterOperator.IEQ, request.status)
        return self._run(
            self.store.orders,
            criteria,
            [request.order_id, request.user_id, request.status],
            "orders",
        )

    def products(self, request: ProductSearchRequest) -> SearchResult:
        criteria = SearchCriteria(unique_keys=[("productId",)])
        criteria.add("productId", "id", FilterOperator.NUMBER_EQ, request.product_id)
        criteria.add("name", "name", FilterOperator.ICONTAINS, request.name)
        criteria.add("categoryId", "category_id", FilterOperator.NUMBER_EQ, request.category_id)
        return self._run(
            self.store.products,
            criteria,
            [request.product_id, request.name, request.category_id],
            "products",
        )

    def reviews(self, request: ReviewSearchRequest) -> SearchResult:
        # A user reviews a product at most once
        criteria = SearchCriteria(unique_keys=[("reviewId",), ("productId", "userId")])
        criteria.add("reviewId", "id", FilterOperator.NUMBER_EQ, request.review_id)
        criteria.add("productId", "product_id", FilterOperator.NUMBER_EQ, request.product_id)
        criteria.add("userId", "user_id", FilterOperator.NUMBER_EQ, request.user_id)
        criteria.add("rating", "rating", FilterOperator.NUMBER_EQ, request.rating)
        return self._run(
            self.store.reviews,
            criteria,
            [request.review_id, request.product_id, request.user_id, request.rating],
            "reviews",
        )

    def users(self, request: UserSearchRequest) -> SearchResult:
        criteria = SearchCriteria(unique_keys=[("email",)])
        criteria.add("email", "email", FilterOperator.IEQ, request.email)
        criteria.add("firstName", "first_name", FilterOperator.ICONTAINS, request.first_name)
        criteria.add("lastName", "last_name", FilterOperator.ICONTAINS, request.last_name)
        return self._run(
            self.store.users,
            criteria,
            [request.email, request.first_name, request.last_name],
            "users",
        )
