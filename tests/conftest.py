"""Shared test fixtures."""

from unittest.mock import MagicMock

import pytest

from taigamart.api import AuthContext, FileTokenStore, MarketplaceAPIClient

NOW = "2024-05-01T12:00:00.000Z"


@pytest.fixture
def now():
    """Fixed timestamp used for missing created_at/updated_at."""
    return NOW


@pytest.fixture
def raw_product():
    """A fully populated backend product record."""
    return {
        "id": 42,
        "name": "Wireless Mouse",
        "slug": "wireless-mouse",
        "sku": "WM-001",
        "description": "<p>Ergonomic wireless mouse.</p>",
        "short_description": "Ergonomic mouse",
        "price": "2000.00",
        "sale_price": "1800",
        "stock_quantity": 15,
        "manage_stock": True,
        "stock_status": "in_stock",
        "is_featured": 1,
        "status": "approved",
        "vendor": {
            "id": 7,
            "business_name": "Acme Co",
            "email": "sales@acme.example",
            "status": "approved",
            "rating": 4.5,
            "total_reviews": 120,
        },
        "category": {"id": 3, "name": "Computer Accessories", "slug": "computer-accessories"},
        "images": [
            {"id": 1, "url": "https://cdn.example.com/mouse.jpg", "alt_text": "Mouse top view",
             "is_primary": True, "sort_order": 0},
            {"id": 2, "url": "https://cdn.example.com/mouse-side.jpg", "sort_order": 1},
        ],
        "attributes": [{"id": 5, "name": "Color", "value": "Black", "type": "color"}],
        "reviews_avg_rating": "4.2",
        "reviews_count": 9,
        "tags": ["mouse", "wireless"],
        "created_at": "2024-01-10T08:00:00.000Z",
        "updated_at": "2024-02-01T09:30:00.000Z",
    }


@pytest.fixture
def minimal_raw_product():
    """A product record with only an id and a name."""
    return {"id": 9, "name": "Plain Mug"}


@pytest.fixture
def raw_vendors():
    """Public vendor directory entries."""
    return [
        {"id": 1, "business_name": "Acme Co", "city": "Colombo", "status": "approved"},
        {"id": 2, "name": "Lanka Crafts", "slug": "lanka-crafts-official"},
        {"id": 3},
    ]


@pytest.fixture
def raw_categories():
    return [
        {"id": 3, "name": "Computer Accessories", "slug": "computer-accessories"},
        {"id": 4, "name": "Home & Living", "children": [{"id": 10, "name": "Kitchen"}]},
    ]


@pytest.fixture
def mock_client():
    """A MagicMock standing in for MarketplaceAPIClient."""
    return MagicMock(spec=MarketplaceAPIClient)


@pytest.fixture
def token_store(tmp_path):
    """File token store in a temporary directory."""
    return FileTokenStore(tmp_path / "auth.json")


@pytest.fixture
def api_client(token_store):
    """Real client with an authenticated storefront context backed by a temp store."""
    auth = AuthContext(token=None, store=token_store)
    auth.login("tok-123")
    return MarketplaceAPIClient("http://api.test", auth=auth)


@pytest.fixture
def make_response():
    """Factory for mock requests.Response objects."""
    return _make_response


def _make_response(status_code=200, json_data=None, headers=None, reason="", text=None):
    """Build a mock requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.headers = headers or {}
    response.reason = reason
    if json_data is None:
        response.json.side_effect = ValueError("No JSON")
        response.content = (text or "").encode()
        response.text = text or ""
    else:
        response.json.return_value = json_data
        response.content = b"{...}"
        response.text = str(json_data)
    return response
