"""
Analytics Helpers
Coercion, rounding and filtering primitives used by the reporting services.
"""

from .coercion import (
    UNKNOWN,
    average,
    display_name,
    full_name,
    parse_timestamp,
    round2,
    same_id,
    to_float,
    to_int_or_float,
    to_month,
    to_number,
    to_timestamp,
)
from .filters import FieldFilter, FilterOperator, SearchCriteria, has_any_value

__all__ = [
    "UNKNOWN",
    "average",
    "display_name",
    "full_name",
    "parse_timestamp",
    "round2",
    "same_id",
    "to_float",
    "to_int_or_float",
    "to_month",
    "to_number",
    "to_timestamp",
    "FieldFilter",
    "FilterOperator",
    "SearchCriteria",
    "has_any_value",
]
