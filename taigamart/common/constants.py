"""
Shared constants for the project.

This module contains application-wide constants that should have a single source of truth.
"""

# Fallback vendor name when a product's vendor has neither name nor business_name
DEFAULT_VENDOR_NAME = "Vendor"

# Fallback alt text for product images without alt_text or product name
DEFAULT_IMAGE_ALT = "Image"

# Backend status values
APPROVED_STATUS = "approved"
IN_STOCK_STATUS = "in_stock"
OUT_OF_STOCK_STATUS = "out_of_stock"

# Local storage keys (storefront keeps a persisted store, POS a plain token)
STOREFRONT_AUTH_KEY = "taiga-auth-storage"
POS_AUTH_KEY = "pos_token"

# Routes the UI redirects to after a 401
STOREFRONT_LOGIN_ROUTE = "/auth/login"
POS_LOGIN_ROUTE = "/login"

# Storefront display currency
DEFAULT_CURRENCY = "LKR"

# Page sizes used by the storefront listing pages
PRODUCTS_PER_PAGE = 20
DEALS_PER_PAGE = 24
HOME_SECTION_LIMIT = 8
CONTENT_PER_PAGE = 12

# Pagination widget shows at most this many numbered buttons
MAX_PAGE_BUTTONS = 5
