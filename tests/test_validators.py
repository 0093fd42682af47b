"""Tests for input validators and formatting helpers."""

from datetime import datetime
from decimal import Decimal

import pytest

from storefront.core.exceptions import ValidationError
from storefront.utils.helpers import format_currency, generate_order_number, mask_card_number
from storefront.utils.validators import (
    normalize_text,
    validate_email_address,
    validate_expiry_date,
    validate_phone_number,
    validate_price,
    validate_quantity,
)


class TestPhone:
    @pytest.mark.parametrize("phone", ["5551234567", "+15551234567", "+44 20 7946 0958", "123456789012345"])
    def test_valid(self, phone):
        assert validate_phone_number(phone).lstrip("+").isdigit()

    @pytest.mark.parametrize("phone", ["555123456", "1234567890123456", "555-CALL-NOW", "++5551234567"])
    def test_invalid(self, phone):
        with pytest.raises(ValidationError):
            validate_phone_number(phone)


class TestEmail:
    def test_normalizes(self):
        assert validate_email_address("  Buyer@Shop.IO ") == "buyer@shop.io"

    @pytest.mark.parametrize("email", ["plainaddress", "missing@tld", "@shop.io", "a@b@shop.io"])
    def test_invalid(self, email):
        with pytest.raises(ValidationError):
            validate_email_address(email)


class TestPriceAndQuantity:
    @pytest.mark.parametrize("price,expected", [("0", Decimal("0")), ("19.99", Decimal("19.99")), (5, Decimal("5"))])
    def test_valid_price(self, price, expected):
        assert validate_price(price) == expected

    @pytest.mark.parametrize("price", ["-1", "abc", "", "NaN", "Infinity"])
    def test_invalid_price(self, price):
        with pytest.raises(ValidationError):
            validate_price(price)

    @pytest.mark.parametrize("quantity", [1, 500, 999])
    def test_valid_quantity(self, quantity):
        assert validate_quantity(quantity) == quantity

    @pytest.mark.parametrize("quantity", [0, 1000, -3, 2.0, "2", True])
    def test_invalid_quantity(self, quantity):
        with pytest.raises(ValidationError):
            validate_quantity(quantity)


class TestExpiry:
    def test_valid(self):
        assert validate_expiry_date(" 01/27 ") == "01/27"

    @pytest.mark.parametrize("expiry", ["00/27", "13/27", "1/27", "01/2027"])
    def test_invalid(self, expiry):
        with pytest.raises(ValidationError):
            validate_expiry_date(expiry)


class TestHelpers:
    def test_format_currency(self):
        assert format_currency(Decimal("1234.5")) == "$1,234.50"
        assert format_currency(Decimal("45"), "CHF") == "CHF 45.00"

    def test_mask_card_number(self):
        assert mask_card_number("1234567890123456") == "**** **** **** 3456"

    def test_generate_order_number(self):
        assert generate_order_number("ORD", 7, datetime(2026, 3, 9)) == "ORD-20260309-00007"

    def test_normalize_text(self):
        assert normalize_text("  a\u200b  b \n c ") == "a b c"
