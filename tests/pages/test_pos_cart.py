"""Tests for taigamart/pages/pos.py"""

from unittest.mock import MagicMock

import pytest

from taigamart.api import APIError, POSService
from taigamart.models import Product
from taigamart.pages import PosCart


@pytest.fixture
def mouse():
    return Product(id="1", name="Wireless Mouse", price=2000, sale_price=1800)


@pytest.fixture
def cable():
    return Product(id="2", name="USB Cable", price=500)


@pytest.fixture
def pos():
    return MagicMock(spec=POSService)


class TestPosCart:
    def test_add_uses_display_price(self, mouse):
        cart = PosCart()
        item = cart.add(mouse)
        assert item.price == 1800
        assert len(cart) == 1

    def test_add_existing_increments(self, mouse):
        cart = PosCart()
        cart.add(mouse)
        cart.add(mouse, 2)
        assert len(cart) == 1
        assert cart.items[0].quantity == 3

    def test_update_quantity_and_remove(self, mouse, cable):
        cart = PosCart()
        cart.add(mouse)
        cart.add(cable)
        cart.update_quantity("2", 4)
        assert cart.items[1].quantity == 4
        cart.update_quantity("1", 0)
        assert [item.product_id for item in cart.items] == ["2"]

    def test_totals_discount_before_tax(self, mouse, cable):
        cart = PosCart(tax_rate=0.1)
        cart.add(mouse)
        cart.add(cable, 2)
        totals = cart.totals(discount_percent=10)
        assert totals.subtotal == 2800
        assert totals.discount == 280
        assert totals.tax == 252
        assert totals.total == 2772

    def test_order_payload(self, cable):
        cart = PosCart()
        cart.add(cable, 2)
        payload = cart.order_payload("card", customer_id="c-9")
        assert payload["payment_method"] == "card"
        assert payload["customer_id"] == "c-9"
        assert payload["items"] == [{"product_id": "2", "quantity": 2, "price": 500, "subtotal": 1000}]
        assert payload["total"] == 1000


class TestCheckout:
    def test_empty_cart_rejected(self, pos):
        with pytest.raises(ValueError):
            PosCart().checkout(pos)
        pos.create_order.assert_not_called()

    def test_success_clears_cart(self, pos, cable):
        pos.create_order.return_value = {"success": True, "order": {"id": 5, "order_number": "POS-5"}}
        cart = PosCart()
        cart.add(cable)
        order = cart.checkout(pos, "cash")
        assert order["order_number"] == "POS-5"
        assert len(cart) == 0

    def test_data_envelope(self, pos, cable):
        pos.create_order.return_value = {"data": {"id": 6}}
        cart = PosCart()
        cart.add(cable)
        assert cart.checkout(pos) == {"id": 6}

    def test_reported_failure_keeps_cart(self, pos, cable):
        pos.create_order.return_value = {"success": False, "message": "Insufficient stock"}
        cart = PosCart()
        cart.add(cable)
        with pytest.raises(APIError, match="Insufficient stock"):
            cart.checkout(pos)
        assert len(cart) == 1

    def test_receipt(self, cable):
        cart = PosCart(tax_rate=0.1)
        cart.add(cable, 2)
        receipt = cart.render_receipt()
        assert "USB Cable" in receipt
        assert "Total:" in receipt
        assert "1100.00" in receipt
