"""
Text Utilities

Helper functions for slugs, price display and content cleanup.
"""

import re
from typing import Optional

from bs4 import BeautifulSoup

from .constants import DEFAULT_CURRENCY


def slugify_name(name: str) -> str:
    """
    Derive a route slug from a display name.

    Lowercases the name and replaces each run of whitespace with a single
    hyphen. Other characters are kept as-is, matching the slugs the
    storefront links to.

    Example:
        >>> slugify_name("Acme Co")
        'acme-co'
    """
    return re.sub(r'\s+', '-', name.lower())


def format_price(amount: float, currency: str = DEFAULT_CURRENCY) -> str:
    """
    Format a price for display.

    Example:
        >>> format_price(1234.5)
        'LKR 1,234.50'
    """
    return f"{currency} {amount:,.2f}"


def calculate_discount(original_price: float, sale_price: float) -> int:
    """
    Whole-number discount percentage of a sale price against the original.

    Returns 0 when the sale price is not lower than the original.
    """
    if not original_price or sale_price >= original_price:
        return 0
    return round((original_price - sale_price) / original_price * 100)


def truncate_text(text: str, max_length: int) -> str:
    """Cut text to max_length characters, appending '...' when shortened."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + '...'


def strip_html(text: Optional[str]) -> str:
    """
    Convert an HTML fragment (as served for content pages) to plain text.

    Args:
        text: HTML or plain text; None is treated as empty

    Returns:
        Text content with whitespace collapsed
    """
    if not text:
        return ""
    if '<' not in text:
        return re.sub(r'\s+', ' ', text).strip()

    soup = BeautifulSoup(text, 'lxml')
    return re.sub(r'\s+', ' ', soup.get_text(' ')).strip()


def get_image_url(path: str, base_url: str) -> str:
    """
    Resolve an image path returned by the API to an absolute URL.

    Absolute URLs and site-root paths are returned unchanged; bare storage
    paths are served from {base_url}/storage/.
    """
    if not path:
        return ""
    if path.startswith('http') or path.startswith('/'):
        return path
    return f"{base_url.rstrip('/')}/storage/{path}"
