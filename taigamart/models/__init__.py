"""
Data models for the storefront and POS clients.

This module contains pure data classes with no business logic.
"""

from .content import Faq, HelpArticle, Job, OrderTracking, Post, PressItem
from .product import (
    Category,
    Product,
    ProductAttribute,
    ProductImage,
    ProductVariation,
    Review,
    Vendor,
)

__all__ = [
    # Catalogue
    'Product', 'ProductImage', 'ProductAttribute', 'ProductVariation',
    'Review', 'Category', 'Vendor',
    # Content
    'Post', 'Faq', 'Job', 'HelpArticle', 'PressItem', 'OrderTracking',
]
