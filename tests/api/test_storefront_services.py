"""Tests for taigamart/api/storefront.py"""

from taigamart.api import CatalogService, ContentService, ProductService, SearchFilters


class TestSearchFilters:
    def test_drops_unset_and_converts_booleans(self):
        params = SearchFilters(category="3", in_stock=True, featured=False, sort="price").to_params()
        assert params == {"category": "3", "in_stock": 1, "featured": 0, "sort": "price"}

    def test_empty(self):
        assert SearchFilters().to_params() == {}


class TestProductService:
    def test_get_products_with_filters_and_page(self, mock_client):
        ProductService(mock_client).get_products(SearchFilters(vendor="7"), page=2, per_page=20)
        mock_client.get.assert_called_once_with(
            "/api/v1/products", {"vendor": "7", "page": 2, "per_page": 20})

    def test_get_product(self, mock_client):
        mock_client.get.return_value = {"data": {"id": 1}}
        assert ProductService(mock_client).get_product("wireless-mouse") == {"data": {"id": 1}}
        mock_client.get.assert_called_once_with("/api/v1/products/wireless-mouse")

    def test_featured(self, mock_client):
        ProductService(mock_client).get_featured_products(8)
        mock_client.get.assert_called_once_with("/api/v1/products/featured", {"limit": 8})

    def test_on_sale(self, mock_client):
        ProductService(mock_client).get_products_on_sale(page=3, per_page=24)
        mock_client.get.assert_called_once_with(
            "/api/v1/products", {"on_sale": 1, "page": 3, "per_page": 24})

    def test_newest(self, mock_client):
        ProductService(mock_client).get_newest_products(8)
        mock_client.get.assert_called_once_with("/api/v1/products", {"sort": "newest", "limit": 8})

    def test_search(self, mock_client):
        ProductService(mock_client).search_products("mouse", SearchFilters(in_stock=True), page=1)
        mock_client.get.assert_called_once_with(
            "/api/v1/products", {"in_stock": 1, "q": "mouse", "page": 1})

    def test_add_review(self, mock_client):
        ProductService(mock_client).add_product_review("42", {"rating": 5})
        mock_client.post.assert_called_once_with("/api/products/42/reviews", {"rating": 5})


class TestCatalogService:
    def test_categories(self, mock_client):
        CatalogService(mock_client).get_categories()
        mock_client.get.assert_called_once_with("/api/v1/categories", {})

    def test_parent_categories(self, mock_client):
        CatalogService(mock_client).get_categories(parent_only=True)
        mock_client.get.assert_called_once_with("/api/v1/categories", {"parent_only": 1})

    def test_vendors(self, mock_client):
        CatalogService(mock_client).get_vendors()
        mock_client.get.assert_called_once_with("/api/vendors")


class TestContentService:
    def test_posts_paginated(self, mock_client):
        ContentService(mock_client).get_posts(2)
        mock_client.get.assert_called_once_with("/api/v1/posts", {"page": 2, "per_page": 12})

    def test_track_order(self, mock_client):
        ContentService(mock_client).track_order("TG-1")
        mock_client.get.assert_called_once_with("/api/v1/orders/track", {"number": "TG-1"})

    def test_send_contact(self, mock_client):
        ContentService(mock_client).send_contact("Jane", "jane@example.com", "Hi")
        mock_client.post.assert_called_once_with(
            "/api/v1/contact", {"name": "Jane", "email": "jane@example.com", "message": "Hi"})


class TestProductServiceRelations:
    def test_by_category(self, mock_client):
        ProductService(mock_client).get_products_by_category("toys", SearchFilters(sort="price", order="asc"))
        mock_client.get.assert_called_once_with(
            "/api/v1/categories/toys/products", {"sort": "price", "order": "asc"})

    def test_by_vendor(self, mock_client):
        ProductService(mock_client).get_products_by_vendor("acme-co")
        mock_client.get.assert_called_once_with("/api/v1/vendors/acme-co/products", {})

    def test_related(self, mock_client):
        ProductService(mock_client).get_related_products("42", limit=4)
        mock_client.get.assert_called_once_with("/api/v1/products/42/related", {"limit": 4})

    def test_reviews_page(self, mock_client):
        ProductService(mock_client).get_product_reviews("42", page=2)
        mock_client.get.assert_called_once_with("/api/v1/products/42/reviews", {"page": 2})

    def test_variations(self, mock_client):
        ProductService(mock_client).get_product_variations("42")
        mock_client.get.assert_called_once_with("/api/products/42/variations")


class TestContentPagesAndPolicies:
    def test_page_by_slug(self, mock_client):
        ContentService(mock_client).get_page("about")
        mock_client.get.assert_called_once_with("/api/v1/pages", {"slug": "about"})

    def test_policy_by_slug(self, mock_client):
        ContentService(mock_client).get_policy("returns")
        mock_client.get.assert_called_once_with("/api/v1/policies", {"slug": "returns"})

    def test_simple_content_endpoints(self, mock_client):
        content = ContentService(mock_client)
        content.get_faqs()
        content.get_jobs()
        content.get_help()
        content.get_size_guide()
        content.get_press(3)
        called = [c.args for c in mock_client.get.call_args_list]
        assert called == [
            ("/api/v1/faqs",),
            ("/api/v1/jobs",),
            ("/api/v1/help",),
            ("/api/v1/size-guide",),
            ("/api/v1/press", {"page": 3, "per_page": 12}),
        ]
