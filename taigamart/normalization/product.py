"""
Product Normalization

Maps a loosely-typed backend product record onto the Product view-model.

normalize_product is total: it accepts any input, never raises, and
always returns a Product whose required fields hold either the source
value or the documented default. Every storefront page goes through
this one function.
"""

import logging
from typing import Any, Iterable, List, Optional

from ..common.constants import APPROVED_STATUS, DEFAULT_IMAGE_ALT, IN_STOCK_STATUS
from ..models import Product, ProductAttribute, ProductImage, ProductVariation, Review
from .catalog import normalize_category, normalize_vendor
from .values import (
    as_list,
    as_mapping,
    first_text,
    now_iso,
    parse_price,
    to_int,
    to_number,
    to_text,
)

logger = logging.getLogger(__name__)


def normalize_image(raw: Any, product_name: Optional[str] = None) -> ProductImage:
    """Map one raw image; alt text falls back to the product name, then "Image"."""
    image = as_mapping(raw)
    alt = image.get('alt_text')
    if alt is None:
        alt = product_name if product_name is not None else DEFAULT_IMAGE_ALT

    return ProductImage(
        id=to_text(image.get('id')),
        url=to_text(image.get('url')),
        alt=to_text(alt),
        is_primary=bool(image.get('is_primary')),
        sort_order=to_int(image.get('sort_order')),
    )


def normalize_attribute(raw: Any) -> ProductAttribute:
    attribute = as_mapping(raw)
    return ProductAttribute(
        id=to_text(attribute.get('id')),
        name=to_text(attribute.get('name')),
        value=to_text(attribute.get('value')),
        type=first_text(attribute.get('type'), default='text'),
    )


def normalize_variation(raw: Any) -> ProductVariation:
    variation = as_mapping(raw)
    return ProductVariation(
        id=to_text(variation.get('id')),
        name=to_text(variation.get('name')),
        price=parse_price(variation.get('price')),
        sale_price=parse_price(variation.get('sale_price'), default=None),
        sku=to_text(variation.get('sku')),
        stock_quantity=to_int(variation.get('stock_quantity')),
        attributes=[normalize_attribute(a) for a in as_list(variation.get('attributes'))],
    )


def normalize_review(raw: Any) -> Review:
    review = as_mapping(raw)
    user = review.get('user')
    author = as_mapping(user).get('name') if isinstance(user, dict) else user

    return Review(
        id=to_text(review.get('id')),
        author=to_text(author),
        rating=to_number(review.get('rating')),
        title=to_text(review.get('title')),
        comment=to_text(review.get('comment')),
        verified_purchase=bool(review.get('verified_purchase')),
        helpful_count=to_int(review.get('helpful_count')),
        status=first_text(review.get('status'), default='pending'),
        created_at=to_text(review.get('created_at')),
    )


def normalize_product(raw: Any, now: Optional[str] = None) -> Product:
    """
    Normalize a raw product record.

    Args:
        raw: Backend record (non-mapping input is treated as empty)
        now: Timestamp for missing created_at/updated_at (defaults to current UTC time)

    Returns:
        Product with every required field populated
    """
    product = as_mapping(raw)
    if raw is not None and not isinstance(raw, dict):
        logger.debug("Normalizing non-mapping product record: %r", type(raw).__name__)

    timestamp = now or now_iso()
    product_id = to_text(product.get('id'))
    name = product.get('name')

    stock_status = product.get('stock_status')
    manage_stock = product.get('manage_stock')
    category = product.get('category')
    tags = [to_text(t) for t in as_list(product.get('tags')) if t is not None]

    return Product(
        id=product_id,
        name=to_text(name),
        slug=to_text(product.get('slug'), default=f"product-{product_id}"),
        sku=to_text(product.get('sku')),
        description=to_text(product.get('description')),
        short_description=to_text(product.get('short_description')),
        price=parse_price(product.get('price')),
        sale_price=parse_price(product.get('sale_price'), default=None),
        stock_quantity=to_int(product.get('stock_quantity')),
        manage_stock=bool(manage_stock) if manage_stock is not None else True,
        in_stock=(stock_status == IN_STOCK_STATUS) if stock_status else True,
        featured=bool(product.get('is_featured')),
        status='active' if product.get('status') == APPROVED_STATUS else 'draft',
        vendor=normalize_vendor(product.get('vendor'), product, now=timestamp),
        categories=[normalize_category(category)] if category else [],
        images=[normalize_image(img, name) for img in as_list(product.get('images'))],
        attributes=[normalize_attribute(a) for a in as_list(product.get('attributes'))],
        variations=[normalize_variation(v) for v in as_list(product.get('variations'))],
        reviews=[normalize_review(r) for r in as_list(product.get('reviews'))],
        average_rating=to_number(product.get('reviews_avg_rating')),
        total_reviews=to_int(product.get('reviews_count')),
        tags=tags,
        meta=dict(as_mapping(product.get('meta'))),
        created_at=first_text(product.get('created_at'), default=timestamp),
        updated_at=first_text(product.get('updated_at'), default=timestamp),
    )


def normalize_products(records: Iterable[Any], now: Optional[str] = None) -> List[Product]:
    """Normalize a list of raw product records, preserving order."""
    timestamp = now or now_iso()
    return [normalize_product(record, now=timestamp) for record in records]
