"""Tests for taigamart/normalization/product.py"""

import pytest

from taigamart.models import Product
from taigamart.normalization import normalize_product, normalize_products


class TestNormalizeProductFull:
    def test_identity_fields(self, raw_product, now):
        product = normalize_product(raw_product, now=now)
        assert product.id == "42"
        assert product.name == "Wireless Mouse"
        assert product.slug == "wireless-mouse"
        assert product.sku == "WM-001"

    def test_prices_parsed_from_strings(self, raw_product, now):
        product = normalize_product(raw_product, now=now)
        assert product.price == 2000.0
        assert product.sale_price == 1800.0
        assert product.display_price == 1800.0

    def test_flags(self, raw_product, now):
        product = normalize_product(raw_product, now=now)
        assert product.in_stock is True
        assert product.featured is True
        assert product.status == "active"
        assert product.manage_stock is True

    def test_vendor_from_business_name(self, raw_product, now):
        vendor = normalize_product(raw_product, now=now).vendor
        assert vendor.id == "7"
        assert vendor.name == "Acme Co"
        assert vendor.slug == "acme-co"
        assert vendor.status == "active"
        assert vendor.rating == 4.5
        assert vendor.total_reviews == 120

    def test_single_category(self, raw_product, now):
        product = normalize_product(raw_product, now=now)
        assert len(product.categories) == 1
        assert product.categories[0].slug == "computer-accessories"

    def test_image_alt_falls_back_to_product_name(self, raw_product, now):
        images = normalize_product(raw_product, now=now).images
        assert images[0].alt == "Mouse top view"
        assert images[1].alt == "Wireless Mouse"

    def test_ratings(self, raw_product, now):
        product = normalize_product(raw_product, now=now)
        assert product.average_rating == 4.2
        assert product.total_reviews == 9

    def test_timestamps_kept(self, raw_product, now):
        product = normalize_product(raw_product, now=now)
        assert product.created_at == "2024-01-10T08:00:00.000Z"
        assert product.updated_at == "2024-02-01T09:30:00.000Z"


class TestNormalizeProductDefaults:
    def test_minimal_record(self, minimal_raw_product, now):
        product = normalize_product(minimal_raw_product, now=now)
        assert product.slug == "product-9"
        assert product.price == 0
        assert product.sale_price is None
        assert product.in_stock is True
        assert product.manage_stock is True
        assert product.status == "draft"
        assert product.categories == []
        assert product.images == []
        assert product.created_at == now
        assert product.updated_at == now

    def test_minimal_vendor(self, minimal_raw_product, now):
        vendor = normalize_product(minimal_raw_product, now=now).vendor
        assert vendor.name == "Vendor"
        assert vendor.slug == "vendor"
        assert vendor.status == "pending"
        assert vendor.created_at == now

    def test_vendor_rating_falls_back_to_product(self, now):
        product = normalize_product({
            "id": 1, "vendor": {"name": "Shop"}, "reviews_avg_rating": 3.5, "reviews_count": 4,
        }, now=now)
        assert product.vendor.rating == 3.5
        assert product.vendor.total_reviews == 4

    def test_vendor_name_preferred_over_business_name(self, now):
        product = normalize_product({"vendor": {"name": "Short", "business_name": "Long Ltd"}}, now=now)
        assert product.vendor.name == "Short"

    def test_out_of_stock(self, now):
        assert normalize_product({"stock_status": "out_of_stock"}, now=now).in_stock is False
        assert normalize_product({"stock_status": "backorder"}, now=now).in_stock is False

    def test_manage_stock_false_kept(self, now):
        assert normalize_product({"manage_stock": False}, now=now).manage_stock is False

    @pytest.mark.parametrize("status", ["pending", "rejected", "draft", None, ""])
    def test_non_approved_status_is_draft(self, status, now):
        assert normalize_product({"status": status}, now=now).status == "draft"

    def test_unparseable_sale_price_is_zero(self, now):
        product = normalize_product({"price": "10", "sale_price": "n/a"}, now=now)
        assert product.sale_price == 0
        assert product.display_price == 10

    def test_image_alt_default_without_name(self, now):
        product = normalize_product({"images": [{"url": "a.jpg"}]}, now=now)
        assert product.images[0].alt == "Image"

    def test_category_name_string(self, now):
        product = normalize_product({"category": "Toys"}, now=now)
        assert product.categories[0].name == "Toys"
        assert product.categories[0].slug == "toys"


class TestNormalizeProductTotality:
    @pytest.mark.parametrize("raw", [
        None, 42, "product", [], {},
        {"vendor": "Acme", "images": "none", "attributes": {"a": 1}},
        {"price": {"amount": 5}, "reviews": [None, 3], "tags": [None, 1]},
    ])
    def test_never_raises(self, raw, now):
        product = normalize_product(raw, now=now)
        assert isinstance(product, Product)
        assert product.vendor.name == "Vendor"

    def test_idempotent_through_record(self, raw_product, now):
        once = normalize_product(raw_product, now=now)
        twice = normalize_product(once.to_record(), now=now)
        assert twice == once

    def test_idempotent_for_minimal_record(self, minimal_raw_product, now):
        once = normalize_product(minimal_raw_product, now=now)
        assert normalize_product(once.to_record(), now="2030-01-01T00:00:00.000Z") == once


class TestNormalizeProducts:
    def test_preserves_order(self, now):
        products = normalize_products([{"id": 2}, {"id": 1}], now=now)
        assert [p.id for p in products] == ["2", "1"]

    def test_empty(self):
        assert normalize_products([]) == []
