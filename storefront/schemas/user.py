"""
User profile, payment method, wishlist and review schemas
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
import uuid

from pydantic import Field, computed_field

from storefront.utils.helpers import mask_card_number, utcnow
from .base import BaseSchema, FrozenSchema


class MembershipType(str, Enum):
    BASIC = "basic"
    PREMIUM = "premium"
    VIP = "vip"


class UserProfile(BaseSchema):
    """The single local user profile"""

    name: str = "John Doe"
    email: str = "john.doe@example.com"
    phone: str = "+15551234567"
    address: str = "123 Main St, San Francisco, CA 94102"
    membership_type: MembershipType = MembershipType.PREMIUM
    rating: float = Field(4.8, ge=0, le=5)
    join_date: datetime = Field(default_factory=utcnow)


class ProfileUpdate(BaseSchema):
    name: str
    email: str
    phone: str
    address: str


class PaymentMethod(BaseSchema):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    card_number: str
    cardholder_name: str
    expiry_date: str = Field(..., description="MM/YY")
    is_default: bool = False

    @computed_field
    @property
    def masked_card_number(self) -> str:
        return mask_card_number(self.card_number)


class PaymentMethodCreate(BaseSchema):
    card_number: str
    cardholder_name: str
    expiry_date: str
    is_default: bool = False


class WishlistItem(FrozenSchema):
    product_id: str
    product_name: str
    price: Decimal = Field(..., ge=0)
    image_name: str = ""
    added_date: datetime = Field(default_factory=utcnow)
    category: str = "general"


class ProductReview(FrozenSchema):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    product_id: str
    product_name: str
    rating: int = Field(..., ge=1, le=5)
    review_text: str = ""
    review_date: datetime = Field(default_factory=utcnow)
    order_number: Optional[str] = None
