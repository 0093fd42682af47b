"""
Helper utilities
"""

from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "INR": "₹",
}

CENTS = Decimal("0.01")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def quantize_amount(amount: Decimal) -> Decimal:
    """Round a currency amount to cents"""
    return Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)


def format_currency(amount: Decimal, currency: str = "USD") -> str:
    """
    Format amount as currency

    Args:
        amount: Amount to format
        currency: Currency code

    Returns:
        Formatted currency string, e.g. "$1,234.50"
    """
    value = quantize_amount(amount)
    symbol = CURRENCY_SYMBOLS.get(currency)

    if symbol:
        return f"{symbol}{value:,.2f}"

    # Default formatting for other currencies
    return f"{currency} {value:,.2f}"


def mask_card_number(card_number: str) -> str:
    """Display form of a card number showing only the last four digits"""
    return f"**** **** **** {card_number[-4:]}"


def generate_order_number(prefix: str, sequence: int, date: Optional[datetime] = None) -> str:
    """
    Build a human readable order number

    Format: PREFIX-YYYYMMDD-NNNNN
    """
    day = (date or utcnow()).strftime("%Y%m%d")
    return f"{prefix}-{day}-{sequence:05d}"
