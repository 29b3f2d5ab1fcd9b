"""
Marketplace API modules.

Modules:
    client     - Shared REST client (auth headers, 401 expiry, error translation)
    auth       - Explicit auth context and file-backed token store
    errors     - APIError hierarchy
    storefront - Product, catalogue and content services
    pos        - Point-of-sale service
"""

from .auth import AuthContext, FileTokenStore
from .client import MarketplaceAPIClient
from .errors import APIError, AuthenticationExpired, TransportError
from .pos import POSService
from .storefront import CatalogService, ContentService, ProductService, SearchFilters

__all__ = [
    # Client
    'MarketplaceAPIClient',
    'AuthContext',
    'FileTokenStore',
    # Errors
    'APIError',
    'TransportError',
    'AuthenticationExpired',
    # Services
    'ProductService',
    'CatalogService',
    'ContentService',
    'POSService',
    'SearchFilters',
]
