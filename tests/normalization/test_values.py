"""Tests for taigamart/normalization/values.py"""

import re

import pytest

from taigamart.normalization.values import first_text, now_iso, parse_price, to_int, to_number, to_text


class TestParsePrice:
    @pytest.mark.parametrize("value, expected", [
        (19.99, 19.99),
        ("19.99", 19.99),
        ("1800", 1800.0),
        ("19.99 LKR", 19.99),
        (" 5", 5.0),
        ("abc", 0),
        ("", 0),
        (float("nan"), 0),
        (True, 0),
        ({"amount": 1}, 0),
    ])
    def test_parses(self, value, expected):
        assert parse_price(value) == expected

    def test_absent_uses_default(self):
        assert parse_price(None) == 0
        assert parse_price(None, default=None) is None


class TestToNumber:
    def test_numeric_string(self):
        assert to_number("4.5") == 4.5

    def test_partial_string_is_default(self):
        assert to_number("4.5 stars") == 0

    def test_none_is_default(self):
        assert to_number(None, default=1) == 1

    def test_to_int_truncates(self):
        assert to_int("7.9") == 7


class TestText:
    def test_to_text(self):
        assert to_text(None, "x") == "x"
        assert to_text(5) == "5"
        assert to_text("") == ""

    def test_first_text_skips_empty(self):
        assert first_text(None, "", "Acme") == "Acme"
        assert first_text(None, default="Vendor") == "Vendor"


def test_now_iso_format():
    assert re.match(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$", now_iso())
