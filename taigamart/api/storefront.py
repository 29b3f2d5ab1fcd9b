"""
Storefront API services.

Thin typed wrappers over the storefront endpoints. Each method returns the
decoded response body untouched; envelope unwrapping and normalization
happen in the page layer.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from ..common.constants import CONTENT_PER_PAGE
from .client import MarketplaceAPIClient


@dataclass
class SearchFilters:
    """Product listing filters accepted by GET /api/v1/products."""
    category: Optional[str] = None
    vendor: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    in_stock: Optional[bool] = None
    featured: Optional[bool] = None
    on_sale: Optional[bool] = None
    rating: Optional[float] = None
    sort: Optional[str] = None       # name / price / rating / newest / oldest
    order: Optional[str] = None      # asc / desc

    def to_params(self) -> Dict[str, Any]:
        """Query parameters with unset filters dropped and booleans sent as 1/0."""
        params = {}
        for key, value in asdict(self).items():
            if value is None:
                continue
            params[key] = int(value) if isinstance(value, bool) else value
        return params


def _params(filters: Optional[SearchFilters] = None, **extra) -> Dict[str, Any]:
    params = filters.to_params() if filters else {}
    params.update({k: v for k, v in extra.items() if v is not None})
    return params


class ProductService:
    """
    Product catalogue endpoints.

    Usage:
        products = ProductService(client)
        body = products.get_products(SearchFilters(on_sale=True), page=2, per_page=24)
    """

    def __init__(self, client: MarketplaceAPIClient):
        self.client = client

    def get_products(self, filters: Optional[SearchFilters] = None,
                     page: Optional[int] = None, per_page: Optional[int] = None) -> Any:
        return self.client.get("/api/v1/products", _params(filters, page=page, per_page=per_page))

    def get_product(self, slug: str) -> Any:
        """Single product by slug or id."""
        return self.client.get(f"/api/v1/products/{slug}")

    def get_featured_products(self, limit: Optional[int] = None) -> Any:
        return self.client.get("/api/v1/products/featured", _params(limit=limit))

    def get_products_on_sale(self, limit: Optional[int] = None,
                             page: Optional[int] = None, per_page: Optional[int] = None) -> Any:
        return self.client.get("/api/v1/products", _params(
            SearchFilters(on_sale=True), limit=limit, page=page, per_page=per_page))

    def get_newest_products(self, limit: Optional[int] = None) -> Any:
        return self.client.get("/api/v1/products", _params(SearchFilters(sort="newest"), limit=limit))

    def get_products_by_category(self, category_slug: str,
                                 filters: Optional[SearchFilters] = None) -> Any:
        return self.client.get(f"/api/v1/categories/{category_slug}/products", _params(filters))

    def get_products_by_vendor(self, vendor_slug: str,
                               filters: Optional[SearchFilters] = None) -> Any:
        return self.client.get(f"/api/v1/vendors/{vendor_slug}/products", _params(filters))

    def search_products(self, query: str, filters: Optional[SearchFilters] = None,
                        page: Optional[int] = None, per_page: Optional[int] = None) -> Any:
        return self.client.get("/api/v1/products", _params(filters, q=query, page=page, per_page=per_page))

    def get_related_products(self, product_id: str, limit: Optional[int] = None) -> Any:
        return self.client.get(f"/api/v1/products/{product_id}/related", _params(limit=limit))

    def get_product_reviews(self, product_id: str, page: Optional[int] = None) -> Any:
        return self.client.get(f"/api/v1/products/{product_id}/reviews", _params(page=page))

    def add_product_review(self, product_id: str, review: Dict[str, Any]) -> Any:
        return self.client.post(f"/api/products/{product_id}/reviews", review)

    def get_product_variations(self, product_id: str) -> Any:
        return self.client.get(f"/api/products/{product_id}/variations")


class CatalogService:
    """Category and vendor directory endpoints."""

    def __init__(self, client: MarketplaceAPIClient):
        self.client = client

    def get_categories(self, parent_only: bool = False) -> Any:
        return self.client.get("/api/v1/categories", _params(parent_only=1 if parent_only else None))

    def get_vendors(self) -> Any:
        return self.client.get("/api/vendors")


class ContentService:
    """Content pages, contact form and order tracking."""

    def __init__(self, client: MarketplaceAPIClient):
        self.client = client

    def get_page(self, slug: str) -> Any:
        return self.client.get("/api/v1/pages", {"slug": slug})

    def get_faqs(self) -> Any:
        return self.client.get("/api/v1/faqs")

    def get_posts(self, page: int = 1) -> Any:
        return self.client.get("/api/v1/posts", {"page": page, "per_page": CONTENT_PER_PAGE})

    def get_jobs(self) -> Any:
        return self.client.get("/api/v1/jobs")

    def get_press(self, page: int = 1) -> Any:
        return self.client.get("/api/v1/press", {"page": page, "per_page": CONTENT_PER_PAGE})

    def track_order(self, number: str) -> Any:
        return self.client.get("/api/v1/orders/track", {"number": number})

    def get_policy(self, slug: str) -> Any:
        return self.client.get("/api/v1/policies", {"slug": slug})

    def get_size_guide(self) -> Any:
        return self.client.get("/api/v1/size-guide")

    def get_help(self) -> Any:
        return self.client.get("/api/v1/help")

    def send_contact(self, name: str, email: str, message: str) -> Any:
        return self.client.post("/api/v1/contact", {"name": name, "email": email, "message": message})
