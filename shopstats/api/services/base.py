"""
Reporting Service Base
Shared lookups for the reporting services.
"""

import logging
from typing import Any, Dict, Hashable, Iterable, List, Optional, Sequence, TypeVar

from ...analytics import UNKNOWN, same_id, to_float, to_int_or_float, to_number
from ...db import Category, CollectionRepository, DataStore, Order, Product, Record
from ..errors import ResourceNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Record)


def number_or_none(value: Any):
    """Coerce a stored value for output; unparseable values become null."""
    number = to_number(value)
    return to_int_or_float(number) if number is not None else None


def ascending_ids(ids: Iterable[Optional[float]]) -> List[Optional[float]]:
    """Sort numeric ids ascending, with unparseable (None) ids last."""
    return sorted(ids, key=lambda i: (i is None, i or 0))


def leading_key(counts: Dict[Hashable, float], keys: Sequence[Hashable]):
    """
    Key of ``keys`` with the highest count.

    A key only replaces the current leader when its count is not lower,
    so ties go to the key listed later.
    """
    best = keys[0]
    for key in keys[1:]:
        if not counts.get(best, 0) > counts.get(key, 0):
            best = key
    return best


class ReportingService:
    """
    Base class for services computing reports over a ``DataStore``.

    Services are cheap to build and hold no state besides the store, so a
    new instance is created per request.
    """

    def __init__(self, store: DataStore):
        """
        Initialize the service.

        Args:
            store: Read-only dataset to report on
        """
        self.store = store

    def _require(self, repository: CollectionRepository[T], entity: str, entity_id) -> T:
        """
        Look up the primary entity of a request.

        Raises:
            ResourceNotFoundError: If no record has ``entity_id``
        """
        record = repository.get(entity_id)
        if record is None:
            raise ResourceNotFoundError(entity, entity_id)
        return record

    def _products_in_category(self, category_id) -> List[Product]:
        """Products whose ``categoryId`` references ``category_id``."""
        return self.store.products.filter(lambda p: same_id(p.category_id, category_id))

    def _category_name(self, category_id, default: Optional[str] = UNKNOWN) -> Optional[str]:
        """Resolve a category name, ``default`` for dangling references."""
        category: Optional[Category] = self.store.categories.get(to_number(category_id))
        return category.name if category else default

    def _product_name(self, product_id) -> Optional[str]:
        """Resolve a product name, "Unknown" for dangling references."""
        product = self.store.products.get(to_number(product_id))
        return product.name if product else UNKNOWN

    @staticmethod
    def _product_ids(products: List[Product]) -> set:
        """Numeric ids of ``products``."""
        return {pid for pid in (to_number(p.id) for p in products) if pid is not None}

    @staticmethod
    def _sales_by_product(orders: Iterable[Order], product_ids: set) -> Dict[float, Dict[str, float]]:
        """Sum quantity and quantity×price per product over the orders' line items."""
        sales: Dict[float, Dict[str, float]] = {}
        for order in orders:
            for item in order.items or []:
                product_id = to_number(item.product_id)
                if product_id not in product_ids:
                    continue
                quantity = to_float(item.quantity)
                entry = sales.setdefault(product_id, {"sales_count": 0.0, "revenue": 0.0})
                entry["sales_count"] += quantity
                entry["revenue"] += quantity * to_float(item.price)
        return sales

    @staticmethod
    def _rank_by_sales(sales: Dict[float, Dict[str, float]]):
        """Sort by units sold, descending; ties keep ascending product id order."""
        return sorted(sorted(sales.items()), key=lambda kv: -kv[1]["sales_count"])
