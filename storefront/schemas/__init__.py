"""Pydantic records for the storefront domain"""

from .product import Product, ProductCategory
from .cart import CartLine, CartTotals
from .order import Order, OrderItem, OrderStatus
from .user import (
    MembershipType,
    PaymentMethod,
    ProductReview,
    UserProfile,
    WishlistItem,
)

__all__ = [
    "Product",
    "ProductCategory",
    "CartLine",
    "CartTotals",
    "Order",
    "OrderItem",
    "OrderStatus",
    "MembershipType",
    "PaymentMethod",
    "ProductReview",
    "UserProfile",
    "WishlistItem",
]
