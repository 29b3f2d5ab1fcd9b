"""
Normalization of backend responses into view-models.

Modules:
    envelope - Unwrap list/item envelopes and pagination totals
    values   - Scalar coercion helpers
    product  - Total product normalizer
    catalog  - Vendor and category normalizers and route lookups
    content  - Content page records
"""

from .catalog import (
    find_category,
    find_vendor,
    normalize_category,
    normalize_public_vendor,
    normalize_vendor,
)
from .content import (
    normalize_faq,
    normalize_help_article,
    normalize_job,
    normalize_order_tracking,
    normalize_post,
    normalize_press_item,
)
from .envelope import extract_last_page, unwrap_item, unwrap_list
from .product import normalize_product, normalize_products
from .values import parse_price

__all__ = [
    # Envelopes
    'unwrap_list', 'unwrap_item', 'extract_last_page',
    # Catalogue
    'normalize_product', 'normalize_products', 'normalize_vendor',
    'normalize_public_vendor', 'normalize_category', 'find_vendor',
    'find_category', 'parse_price',
    # Content
    'normalize_post', 'normalize_faq', 'normalize_job',
    'normalize_help_article', 'normalize_press_item', 'normalize_order_tracking',
]
