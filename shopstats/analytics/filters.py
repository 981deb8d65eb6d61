"""
Record Filtering
Conjunctive field filters for the search endpoints.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, List, Optional, Sequence, Tuple, TypeVar

from .coercion import to_number

logger = logging.getLogger(__name__)

R = TypeVar("R")


class FilterOperator(Enum):
    """Comparison operators for field filters."""

    NUMBER_EQ = "number_eq"  # numeric equality, both sides coerced
    IEQ = "ieq"  # case-insensitive exact match
    ICONTAINS = "icontains"  # case-insensitive substring match


@dataclass
class FieldFilter:
    """
    Single filter condition on a record attribute.

    Example:
        FieldFilter("name", FilterOperator.ICONTAINS, "shirt")
        FieldFilter("category_id", FilterOperator.NUMBER_EQ, 3)
    """

    field: str
    operator: FilterOperator
    value: Any

    def matches(self, record: Any) -> bool:
        """Check whether ``record`` satisfies this condition."""
        actual = getattr(record, self.field, None)

        if self.operator == FilterOperator.NUMBER_EQ:
            # Coerced like the stored side; null filter values match nothing
            expected = to_number(self.value)
            return expected is not None and to_number(actual) == expected

        if not isinstance(actual, str) or not actual:
            return False

        needle = str(self.value).lower()
        if self.operator == FilterOperator.IEQ:
            return actual.lower() == needle
        return needle in actual.lower()


@dataclass
class SearchCriteria:
    """
    AND-ed set of field filters plus the keys that identify a single record.

    ``unique_keys`` lists groups of request fields; when every field of a
    group was supplied and exactly one record matches, the result is
    returned as a single record instead of a list.
    """

    filters: List[FieldFilter] = field(default_factory=list)
    supplied: List[str] = field(default_factory=list)
    unique_keys: Sequence[Tuple[str, ...]] = ()

    def add(self, name: str, record_field: str, operator: FilterOperator, value: Any) -> None:
        """
        Add a filter for request field ``name`` if a value was supplied.

        Numeric filters apply whenever the value is not null; text filters
        only when the value is non-empty.
        """
        if operator == FilterOperator.NUMBER_EQ:
            if value is None:
                return
        elif not value:
            return

        self.filters.append(FieldFilter(record_field, operator, value))
        self.supplied.append(name)

    def apply(self, records: Iterable[R]) -> List[R]:
        """Return the records matching every filter, in their original order."""
        matched = list(records)
        for f in self.filters:
            matched = [record for record in matched if f.matches(record)]
        logger.debug(f"Search filters matched {len(matched)} records", extra={"fields": self.supplied})
        return matched

    def identifies_single(self, matched: Sequence[Any]) -> bool:
        """Check whether ``matched`` should be returned as a single record."""
        if len(matched) != 1:
            return False
        return any(all(key in self.supplied for key in group) for group in self.unique_keys)


def has_any_value(values: Iterable[Optional[Any]]) -> bool:
    """Check that at least one search field carries a truthy value."""
    return any(values)
