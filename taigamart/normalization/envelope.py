"""
Response Envelope Unwrapping

The backend wraps result lists inconsistently. A list may arrive as:
    - a bare array:                 [...]
    - a data envelope:              {"data": [...]}
    - a paginated double envelope:  {"data": {"data": [...], "last_page": N}}

Pagination totals live either inside the inner envelope (data.last_page)
or in a sibling meta block (meta.last_page).

None of these helpers raise: an unexpected shape is an empty result.
"""

from typing import Any, Dict, List, Optional


def unwrap_list(body: Any) -> List[Any]:
    """
    Extract the record list from a response body of unknown shape.

    Tries, in order: bare array, body.data, body.data.data.

    Args:
        body: Decoded JSON response (any type)

    Returns:
        The record list, or an empty list
    """
    if isinstance(body, list):
        return body
    if not isinstance(body, dict):
        return []

    data = body.get('data')
    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get('data'), list):
        return data['data']
    return []


def unwrap_item(body: Any) -> Optional[Dict[str, Any]]:
    """
    Extract a single record from a {"data": {...}} envelope.

    A double envelope ({"data": {"data": {...}}}) is unwrapped once more.

    Returns:
        The record mapping, or None when the body carries no record
    """
    if not isinstance(body, dict):
        return None

    data = body.get('data')
    if not isinstance(data, dict) or not data:
        return None
    inner = data.get('data')
    if isinstance(inner, dict) and inner:
        return inner
    return data


def _positive_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return number if number > 0 else None


def extract_last_page(body: Any) -> int:
    """
    Total page count of a paginated response.

    Precedence: data.last_page, then meta.last_page, then 1.
    Zero, null or non-numeric values fall through to the next source.
    """
    if not isinstance(body, dict):
        return 1

    for section in ('data', 'meta'):
        block = body.get(section)
        if isinstance(block, dict):
            last_page = _positive_int(block.get('last_page'))
            if last_page is not None:
                return last_page
    return 1
