"""
POS Cart

In-store sale being rung up: line items, discount and tax, and the order
payload sent to the POS API.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..api.errors import APIError
from ..api.pos import POSService
from ..models import Product

logger = logging.getLogger(__name__)


@dataclass
class CartItem:
    product_id: str
    name: str
    price: float
    quantity: int = 1

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity


@dataclass
class CartTotals:
    subtotal: float
    discount: float
    tax: float
    total: float


class PosCart:
    """
    Usage:
        cart = PosCart(tax_rate=0.08)
        cart.add(product)
        cart.update_quantity(product.id, 3)
        cart.totals(discount_percent=10).total
    """

    def __init__(self, tax_rate: float = 0.0):
        self.tax_rate = tax_rate
        self.items: List[CartItem] = []

    def __len__(self) -> int:
        return len(self.items)

    def _find(self, product_id: str) -> Optional[CartItem]:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    def add(self, product: Product, quantity: int = 1) -> CartItem:
        """Add a product at its display price; an existing line is incremented."""
        item = self._find(product.id)
        if item:
            item.quantity += quantity
            return item

        item = CartItem(product_id=product.id, name=product.name,
                        price=product.display_price, quantity=quantity)
        self.items.append(item)
        return item

    def update_quantity(self, product_id: str, quantity: int) -> None:
        """Set a line's quantity; zero or less removes it."""
        if quantity <= 0:
            self.remove(product_id)
            return
        item = self._find(product_id)
        if item:
            item.quantity = quantity

    def remove(self, product_id: str) -> None:
        self.items = [item for item in self.items if item.product_id != product_id]

    def clear(self) -> None:
        self.items = []

    def totals(self, discount_percent: float = 0) -> CartTotals:
        """Discount applies to the subtotal; tax applies after the discount."""
        subtotal = sum(item.subtotal for item in self.items)
        discount = subtotal * (discount_percent / 100)
        tax = (subtotal - discount) * self.tax_rate
        return CartTotals(
            subtotal=round(subtotal, 2),
            discount=round(discount, 2),
            tax=round(tax, 2),
            total=round(subtotal - discount + tax, 2),
        )

    def order_payload(
        self,
        payment_method: str = "cash",
        customer_id: Optional[str] = None,
        discount_percent: float = 0,
    ) -> Dict[str, Any]:
        """Body for POST /orders."""
        totals = self.totals(discount_percent)
        return {
            "customer_id": customer_id,
            "items": [
                {
                    "product_id": item.product_id,
                    "quantity": item.quantity,
                    "price": item.price,
                    "subtotal": round(item.subtotal, 2),
                }
                for item in self.items
            ],
            "subtotal": totals.subtotal,
            "discount": totals.discount,
            "tax": totals.tax,
            "total": totals.total,
            "payment_method": payment_method,
        }

    def checkout(
        self,
        pos: POSService,
        payment_method: str = "cash",
        customer_id: Optional[str] = None,
        discount_percent: float = 0,
    ) -> Dict[str, Any]:
        """
        Submit the sale and empty the cart.

        Returns:
            The created order record

        Raises:
            ValueError: If the cart is empty
            APIError: If the request fails or the API reports failure
        """
        if not self.items:
            raise ValueError("Cannot check out an empty cart")

        body = pos.create_order(self.order_payload(payment_method, customer_id, discount_percent))
        if not isinstance(body, dict) or body.get("success") is False:
            message = body.get("message") if isinstance(body, dict) else None
            raise APIError(message or "Order was not created", data=body)

        order = body.get("order") or body.get("data")
        if not isinstance(order, dict):
            order = {}
        logger.info("Order created: %s", order.get("order_number") or order.get("id") or "unknown")
        self.clear()
        return order

    def render_receipt(self, discount_percent: float = 0) -> str:
        lines = []
        for item in self.items:
            lines.append(f"{item.name[:30]:30} x{item.quantity:<3} ${item.subtotal:>10.2f}")
        totals = self.totals(discount_percent)
        lines.append("-" * 48)
        lines.append(f"{'Subtotal:':36}${totals.subtotal:>10.2f}")
        if totals.discount:
            lines.append(f"{'Discount:':36}-${totals.discount:>9.2f}")
        if totals.tax:
            lines.append(f"{'Tax:':36}${totals.tax:>10.2f}")
        lines.append(f"{'Total:':36}${totals.total:>10.2f}")
        return "\n".join(lines)
