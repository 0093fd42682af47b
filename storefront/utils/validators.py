"""Custom validators and sanitizers"""

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

import bleach
from email_validator import validate_email, EmailNotValidError

from storefront.core.exceptions import ValidationError

# 10-15 digits with an optional leading +
PHONE_PATTERN = re.compile(r"^\+?\d{10,15}$")

# Card expiry as MM/YY
EXPIRY_PATTERN = re.compile(r"^(0[1-9]|1[0-2])/\d{2}$")

CARD_NUMBER_PATTERN = re.compile(r"^\d{12,19}$")

MIN_QUANTITY = 1
MAX_QUANTITY = 999


def validate_email_address(email: str) -> str:
    """Validate and normalize email"""
    email = email.strip().lower()

    try:
        validation = validate_email(email, check_deliverability=False)
        return validation.normalized
    except EmailNotValidError as e:
        raise ValidationError(f"Invalid email address: {e}")


def validate_phone_number(phone: str) -> str:
    """Validate phone number; spaces, dashes and parentheses are ignored"""
    cleaned = re.sub(r"[\s\-()]", "", phone)

    if not PHONE_PATTERN.match(cleaned):
        raise ValidationError("Phone number must be 10-15 digits with an optional leading +")

    return cleaned


def validate_price(price: Any) -> Decimal:
    """Parse a non-negative currency amount"""
    try:
        value = Decimal(str(price).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"Invalid price: {price!r}")

    if not value.is_finite() or value < 0:
        raise ValidationError(f"Invalid price: {price!r}")

    return value


def validate_quantity(quantity: Any, max_quantity: int = MAX_QUANTITY) -> int:
    """Quantity must be an integer between 1 and max_quantity"""
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError("Quantity must be a whole number")

    if quantity < MIN_QUANTITY or quantity > max_quantity:
        raise ValidationError(f"Quantity must be between {MIN_QUANTITY} and {max_quantity}")

    return quantity


def validate_rating(rating: Any) -> int:
    """Review ratings are whole stars from 1 to 5"""
    if isinstance(rating, bool) or not isinstance(rating, int) or not 1 <= rating <= 5:
        raise ValidationError("Rating must be a whole number from 1 to 5")
    return rating


def validate_card_number(card_number: str) -> str:
    """Strip separators and check the digit count"""
    cleaned = re.sub(r"[\s\-]", "", card_number)

    if not CARD_NUMBER_PATTERN.match(cleaned):
        raise ValidationError("Card number must contain 12-19 digits")

    return cleaned


def validate_expiry_date(expiry: str) -> str:
    """Validate card expiry in MM/YY form"""
    expiry = expiry.strip()

    if not EXPIRY_PATTERN.match(expiry):
        raise ValidationError("Expiry date must be in MM/YY format")

    return expiry


def validate_required(value: Optional[str], field: str) -> str:
    """Normalize a text field and reject it when blank"""
    value = normalize_text(value or "")
    if not value:
        raise ValidationError(f"{field} is required")
    return value


def sanitize_html(html: str) -> str:
    """Strip all markup from user supplied text"""
    return bleach.clean(html, tags=[], attributes={}, strip=True)


def normalize_text(text: str) -> str:
    """Normalize text input"""
    # Remove zero-width characters
    text = re.sub(r'[\u200b\u200c\u200d\ufeff]', '', text)

    # Remove extra whitespace
    return " ".join(text.split())
