"""
Page state and rendering.

Modules:
    fetch_cycle - Loading/loaded/empty/error state for lists and single records
    forms       - Contact and order-tracking form submission
    storefront  - Storefront pages rendered as text
    pos         - Point-of-sale cart
    render      - Text renderers for products, vendors, categories, pagination
"""

from .fetch_cycle import FetchCycle, FetchStatus, ItemFetchCycle, PaginatedFetchCycle
from .forms import ContactForm, FormStatus, FormSubmission, OrderTrackingForm
from .pos import CartItem, CartTotals, PosCart
from .storefront import (
    CONTENT_PAGES,
    CategoriesPage,
    CategoryProductsPage,
    DealsPage,
    HomePage,
    ProductDetailPage,
    ProductGridPage,
    ProductListPage,
    RecordListPage,
    SizeGuidePage,
    VendorProductsPage,
    VendorsPage,
    WishlistPage,
)

__all__ = [
    # Fetch cycles
    'FetchCycle', 'PaginatedFetchCycle', 'ItemFetchCycle', 'FetchStatus',
    # Forms
    'FormSubmission', 'FormStatus', 'ContactForm', 'OrderTrackingForm',
    # POS
    'PosCart', 'CartItem', 'CartTotals',
    # Storefront
    'HomePage', 'ProductListPage', 'DealsPage', 'CategoriesPage',
    'CategoryProductsPage', 'VendorsPage', 'VendorProductsPage',
    'ProductDetailPage', 'WishlistPage', 'SizeGuidePage', 'ProductGridPage',
    'RecordListPage', 'CONTENT_PAGES',
]
