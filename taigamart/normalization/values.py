"""
Scalar coercion helpers shared by the normalizers.

Backend payloads serialize numbers as strings or numbers interchangeably and
omit or null out fields at will. Every helper here returns a usable value
for any input.
"""

import math
import re
from datetime import datetime, timezone
from numbers import Number
from typing import Any, Dict, List, Optional

# Leading decimal number, as parseFloat reads it ("19.99 LKR" -> 19.99)
_LEADING_NUMBER = re.compile(r'^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?')


def _finite(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, Number):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def parse_price(value: Any, default: Optional[float] = 0) -> Optional[float]:
    """
    Parse a price that may be a number or a numeric string.

    Args:
        value: Raw field value
        default: Returned when the field is absent (None)

    Returns:
        Parsed number; 0 when a present value cannot be parsed
    """
    if value is None:
        return default
    if isinstance(value, str):
        match = _LEADING_NUMBER.match(value)
        if not match:
            return 0
        number = float(match.group(0))
        return number if math.isfinite(number) else 0
    number = _finite(value)
    return number if number is not None else 0


def to_number(value: Any, default: float = 0) -> float:
    """Coerce a whole-field numeric value ("4.5" -> 4.5); unparseable -> default."""
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return default
        return number if math.isfinite(number) else default
    number = _finite(value)
    return number if number is not None else default


def to_int(value: Any, default: int = 0) -> int:
    """Integer variant of to_number (fractions are truncated)."""
    return int(to_number(value, default))


def to_text(value: Any, default: str = "") -> str:
    """String value of a field; None falls back to default."""
    if value is None:
        return default
    return value if isinstance(value, str) else str(value)


def first_text(*values: Any, default: str = "") -> str:
    """First truthy value as a string, else default."""
    for value in values:
        if value:
            return to_text(value)
    return default


def as_mapping(value: Any) -> Dict[str, Any]:
    """The value when it is a mapping, else an empty dict."""
    return value if isinstance(value, dict) else {}


def as_list(value: Any) -> List[Any]:
    """The value when it is a list, else an empty list."""
    return value if isinstance(value, list) else []


def now_iso() -> str:
    """Current UTC time as ISO-8601 with milliseconds ("2024-05-01T12:00:00.000Z")."""
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')
