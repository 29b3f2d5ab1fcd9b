"""
Point-of-sale API service.

The POS client talks to the /api-prefixed backend with its own token
("pos_token") and login route.
"""

from typing import Any, Dict, Optional

from .client import MarketplaceAPIClient


class POSService:
    """
    In-store operations: products, orders, payments, inventory, reports, customers.

    Usage:
        pos = POSService(MarketplaceAPIClient(settings.pos_api_url, auth=pos_auth))
        pos.get_dashboard_stats()
    """

    def __init__(self, client: MarketplaceAPIClient):
        self.client = client

    # Products
    def get_products(self, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.client.get("/products", params)

    def create_product(self, product: Dict[str, Any]) -> Any:
        return self.client.post("/products", product)

    def update_product(self, product_id: int, product: Dict[str, Any]) -> Any:
        return self.client.put(f"/products/{product_id}", product)

    def delete_product(self, product_id: int) -> Any:
        return self.client.delete(f"/products/{product_id}")

    # Orders
    def create_order(self, order: Dict[str, Any]) -> Any:
        return self.client.post("/orders", order)

    def get_orders(self, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.client.get("/orders", params)

    def update_order_status(self, order_id: int, status: str) -> Any:
        return self.client.put(f"/orders/{order_id}/status", {"status": status})

    # Payments
    def process_payment(self, payment: Dict[str, Any]) -> Any:
        return self.client.post("/payments/process", payment)

    # Inventory
    def get_inventory(self, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.client.get("/inventory", params)

    def update_stock(self, product_id: int, quantity: int) -> Any:
        return self.client.put(f"/inventory/{product_id}", {"quantity": quantity})

    # Reports
    def get_dashboard_stats(self) -> Any:
        return self.client.get("/reports/dashboard")

    def get_sales_report(self, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.client.get("/reports/sales", params)

    def get_inventory_report(self) -> Any:
        return self.client.get("/reports/inventory")

    # Categories
    def get_categories(self) -> Any:
        return self.client.get("/categories")

    # Customers
    def search_customers(self, query: str) -> Any:
        return self.client.get("/customers/search", {"q": query})

    def create_customer(self, customer: Dict[str, Any]) -> Any:
        return self.client.post("/customers", customer)
