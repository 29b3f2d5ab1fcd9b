"""
Vendor and category normalization.

Vendors show up in two shapes: nested inside a product record (where rating
and review counts may only exist on the product itself) and in the public
vendor directory. Categories are nested inside products or listed on their
own, and may arrive as a bare name string.
"""

from typing import Any, Iterable, Optional

from ..common.constants import APPROVED_STATUS, DEFAULT_VENDOR_NAME
from ..common.text_utils import slugify_name
from ..models import Category, Vendor
from .values import as_list, as_mapping, first_text, now_iso, to_int, to_number, to_text


def _vendor_status(raw: dict) -> str:
    return 'active' if raw.get('status') == APPROVED_STATUS else 'pending'


def normalize_vendor(raw: Any, product: Any = None, now: Optional[str] = None) -> Vendor:
    """
    Normalize the vendor nested inside a product record.

    Args:
        raw: Raw vendor mapping (anything else counts as empty)
        product: Owning raw product, supplies rating/review fallbacks
        now: Timestamp used for missing created_at/updated_at

    Returns:
        Vendor with every field populated
    """
    vendor = as_mapping(raw)
    owner = as_mapping(product)
    timestamp = now or now_iso()

    name = first_text(vendor.get('name'), vendor.get('business_name'), default=DEFAULT_VENDOR_NAME)
    rating = vendor.get('rating')
    total_reviews = vendor.get('total_reviews')

    return Vendor(
        id=to_text(vendor.get('id')),
        name=name,
        slug=first_text(vendor.get('slug')) or slugify_name(name),
        email=first_text(vendor.get('email'), vendor.get('business_email')),
        rating=to_number(rating if rating is not None else owner.get('reviews_avg_rating')),
        total_reviews=to_int(total_reviews if total_reviews is not None else owner.get('reviews_count')),
        total_products=to_int(vendor.get('total_products')),
        status=_vendor_status(vendor),
        city=to_text(vendor.get('city')),
        logo=to_text(vendor.get('logo')),
        created_at=first_text(vendor.get('created_at'), default=timestamp),
        updated_at=first_text(vendor.get('updated_at'), default=timestamp),
    )


def normalize_public_vendor(raw: Any, now: Optional[str] = None) -> Vendor:
    """
    Normalize an entry of the public vendor directory (GET /api/vendors).

    The directory prefers the registered business name and falls back to
    "Vendor <id>" so that every card has a distinct label.
    """
    vendor = as_mapping(raw)
    vendor_id = to_text(vendor.get('id'))
    name = first_text(vendor.get('business_name'), vendor.get('name'), default=f"Vendor {vendor_id}")

    normalized = normalize_vendor(vendor, now=now)
    normalized.name = name
    normalized.slug = first_text(vendor.get('slug')) or slugify_name(name)
    return normalized


def find_vendor(records: Iterable[Any], slug: str) -> Optional[dict]:
    """
    Locate a raw vendor by route slug.

    Matches the explicit slug first, then the slugified business name / name.
    """
    vendors = [as_mapping(r) for r in records]
    for vendor in vendors:
        if vendor.get('slug') == slug:
            return vendor
    for vendor in vendors:
        name = first_text(vendor.get('business_name'), vendor.get('name'))
        if name and slugify_name(name) == slug:
            return vendor
    return None


def normalize_category(raw: Any) -> Category:
    """
    Normalize a category mapping or bare category name.

    Returns:
        Category with slug derived from the name when absent
    """
    if isinstance(raw, str):
        return Category(name=raw, slug=slugify_name(raw))

    category = as_mapping(raw)
    name = to_text(category.get('name'))
    return Category(
        id=to_text(category.get('id')),
        name=name,
        slug=first_text(category.get('slug')) or slugify_name(name),
        description=to_text(category.get('description')),
        image=to_text(category.get('image')),
        parent_id=to_text(category.get('parent_id')),
        children=[normalize_category(c) for c in as_list(category.get('children'))],
    )


def find_category(records: Iterable[Any], slug: str) -> Optional[dict]:
    """Locate a raw category by slug, falling back to a numeric id in the route."""
    categories = [as_mapping(r) for r in records]
    for category in categories:
        if category.get('slug') == slug:
            return category
    for category in categories:
        if category.get('id') is not None and str(category.get('id')) == str(slug):
            return category
    return None
