"""
Lenient Coercion
Numeric parsing, rounding and lookup helpers shared by the reporting layer.

Stored data is trusted to be roughly right, not exactly right: unparseable
numbers count as 0, dangling references resolve to "Unknown", and nothing
here raises.
"""

import math
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import TYPE_CHECKING, Any, Iterable, Optional, Union

if TYPE_CHECKING:
    from ..db.models import User

Number = Union[int, float]

UNKNOWN = "Unknown"

_CENTS = Decimal("0.01")


def to_number(value: Any) -> Optional[float]:
    """
    Parse a value as a finite float.

    Args:
        value: Raw value (number, numeric string, None, ...)

    Returns:
        The parsed number, or None if it is missing, unparseable or non-finite
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, str):
        value = value.strip()
        # float() also reads digit separators such as "1_000"
        if not value or "_" in value:
            return None

    try:
        number = float(value)
    except (TypeError, ValueError):
        return None

    return number if math.isfinite(number) else None


def to_float(value: Any) -> float:
    """Parse a value as a float, falling back to 0.0."""
    number = to_number(value)
    return number if number is not None else 0.0


def to_int_or_float(number: float) -> Number:
    """Return integral floats as int so ids serialize as ``1`` not ``1.0``."""
    return int(number) if float(number).is_integer() else number


def same_id(value: Any, target: Optional[float]) -> bool:
    """Check whether a stored reference points at ``target``."""
    if target is None:
        return False
    number = to_number(value)
    return number is not None and number == target


def round2(value: float) -> float:
    """Round to 2 decimals, half away from zero."""
    if not math.isfinite(value):
        return 0.0
    exact = Decimal(repr(value))
    # Room for every integer digit plus the two decimals
    context = Context(prec=max(28, exact.adjusted() + 4))
    return float(exact.quantize(_CENTS, rounding=ROUND_HALF_UP, context=context))


def average(values: Iterable[float]) -> Number:
    """Rounded mean of ``values``, 0 for an empty input."""
    values = list(values)
    if not values:
        return 0
    return round2(sum(values) / len(values))


def parse_timestamp(value: Any) -> Optional[float]:
    """
    Convert a stored timestamp to epoch milliseconds.

    Accepts epoch millis (number or numeric string) and ISO-8601 strings;
    naive ISO times are taken as UTC.

    Returns:
        Epoch millis, or None if the value is not a timestamp
    """
    number = to_number(value)
    if number is not None:
        return number

    if isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.timestamp() * 1000

    return None


def to_timestamp(value: Any) -> float:
    """Epoch millis of a stored timestamp; anything unparseable counts as epoch 0."""
    millis = parse_timestamp(value)
    return millis if millis is not None else 0


def to_month(value: Any) -> Optional[str]:
    """UTC ``YYYY-MM`` of a stored timestamp, None when it cannot be dated."""
    millis = parse_timestamp(value)
    if millis is None:
        return None
    try:
        moment = datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None
    return f"{moment.year:04d}-{moment.month:02d}"


def full_name(user: "User") -> str:
    """Join first and last name, leaving missing parts blank."""
    return f"{user.first_name or ''} {user.last_name or ''}"


def display_name(user: Optional["User"]) -> Optional[str]:
    """
    Reviewer display name.

    Falls back to the email when both name parts are empty and to
    "Unknown" when the user does not exist.
    """
    if user is None:
        return UNKNOWN
    name = f"{user.first_name or ''} {user.last_name or ''}".strip()
    return name or user.email
