"""
Product view-models.

Pure data classes for the normalized storefront catalogue.
No business logic - each class only knows how to emit its own raw record
(the shape the backend serves), which normalization maps back unchanged.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..common.constants import APPROVED_STATUS, IN_STOCK_STATUS, OUT_OF_STOCK_STATUS


@dataclass
class ProductImage:
    """Product image with metadata."""
    id: str = ""
    url: str = ""
    alt: str = ""
    is_primary: bool = False
    sort_order: int = 0

    def to_record(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'url': self.url,
            'alt_text': self.alt,
            'is_primary': self.is_primary,
            'sort_order': self.sort_order,
        }


@dataclass
class ProductAttribute:
    """Name/value attribute (type is one of text, number, boolean, color, size)."""
    id: str = ""
    name: str = ""
    value: str = ""
    type: str = "text"

    def to_record(self) -> Dict[str, Any]:
        return {'id': self.id, 'name': self.name, 'value': self.value, 'type': self.type}


@dataclass
class ProductVariation:
    """Purchasable variation of a product."""
    id: str = ""
    name: str = ""
    price: float = 0
    sale_price: Optional[float] = None
    sku: str = ""
    stock_quantity: int = 0
    attributes: List[ProductAttribute] = field(default_factory=list)

    def to_record(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'price': self.price,
            'sale_price': self.sale_price,
            'sku': self.sku,
            'stock_quantity': self.stock_quantity,
            'attributes': [a.to_record() for a in self.attributes],
        }


@dataclass
class Review:
    """Customer review attached to a product."""
    id: str = ""
    author: str = ""
    rating: float = 0
    title: str = ""
    comment: str = ""
    verified_purchase: bool = False
    helpful_count: int = 0
    status: str = "pending"     # approved / pending / rejected
    created_at: str = ""

    def to_record(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'user': {'name': self.author},
            'rating': self.rating,
            'title': self.title,
            'comment': self.comment,
            'verified_purchase': self.verified_purchase,
            'helpful_count': self.helpful_count,
            'status': self.status,
            'created_at': self.created_at,
        }


@dataclass
class Category:
    """Catalogue category (children are nested categories)."""
    id: str = ""
    name: str = ""
    slug: str = ""
    description: str = ""
    image: str = ""
    parent_id: str = ""
    children: List['Category'] = field(default_factory=list)

    def to_record(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'slug': self.slug,
            'description': self.description,
            'image': self.image,
            'parent_id': self.parent_id,
            'children': [c.to_record() for c in self.children],
        }


@dataclass
class Vendor:
    """
    Marketplace vendor.

    Used both nested inside a Product and for the public vendor directory
    (which additionally fills city and logo).
    """
    id: str = ""
    name: str = ""
    slug: str = ""
    email: str = ""
    rating: float = 0
    total_reviews: int = 0
    total_products: int = 0
    status: str = "pending"     # active / inactive / pending
    city: str = ""
    logo: str = ""
    created_at: str = ""
    updated_at: str = ""

    def to_record(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'slug': self.slug,
            'email': self.email,
            'rating': self.rating,
            'total_reviews': self.total_reviews,
            'total_products': self.total_products,
            'status': APPROVED_STATUS if self.status == 'active' else self.status,
            'city': self.city,
            'logo': self.logo,
            'created_at': self.created_at,
            'updated_at': self.updated_at,
        }


@dataclass
class Product:
    """
    Normalized product as rendered by the storefront.

    Field Groups:
    - Identity: id, name, slug, sku
    - Pricing: price, sale_price (None when the product is not on sale)
    - Stock: stock_quantity, manage_stock, in_stock
    - Display: featured, status ("active" or "draft")
    - Relations: vendor, categories (at most one), images, attributes,
      variations, reviews
    - Timestamps: ISO-8601 strings
    """

    # Identity
    id: str = ""
    name: str = ""
    slug: str = ""
    sku: str = ""
    description: str = ""
    short_description: str = ""

    # Pricing
    price: float = 0
    sale_price: Optional[float] = None

    # Stock
    stock_quantity: int = 0
    manage_stock: bool = True
    in_stock: bool = True

    featured: bool = False
    status: str = "draft"

    vendor: Vendor = field(default_factory=Vendor)
    categories: List[Category] = field(default_factory=list)
    images: List[ProductImage] = field(default_factory=list)
    attributes: List[ProductAttribute] = field(default_factory=list)
    variations: List[ProductVariation] = field(default_factory=list)
    reviews: List[Review] = field(default_factory=list)

    average_rating: float = 0
    total_reviews: int = 0
    tags: List[str] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)

    created_at: str = ""
    updated_at: str = ""

    @property
    def display_price(self) -> float:
        """Price shown to the customer (sale price when it is set and lower)."""
        if self.sale_price and self.sale_price < self.price:
            return self.sale_price
        return self.price

    def to_record(self) -> Dict[str, Any]:
        """Raw backend record that normalizes back to this product."""
        return {
            'id': self.id,
            'name': self.name,
            'slug': self.slug,
            'sku': self.sku,
            'description': self.description,
            'short_description': self.short_description,
            'price': self.price,
            'sale_price': self.sale_price,
            'stock_quantity': self.stock_quantity,
            'manage_stock': self.manage_stock,
            'stock_status': IN_STOCK_STATUS if self.in_stock else OUT_OF_STOCK_STATUS,
            'is_featured': self.featured,
            'status': APPROVED_STATUS if self.status == 'active' else self.status,
            'vendor': self.vendor.to_record(),
            'category': self.categories[0].to_record() if self.categories else None,
            'images': [img.to_record() for img in self.images],
            'attributes': [a.to_record() for a in self.attributes],
            'variations': [v.to_record() for v in self.variations],
            'reviews': [r.to_record() for r in self.reviews],
            'reviews_avg_rating': self.average_rating,
            'reviews_count': self.total_reviews,
            'tags': list(self.tags),
            'meta': dict(self.meta),
            'created_at': self.created_at,
            'updated_at': self.updated_at,
        }
