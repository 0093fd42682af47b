"""Domain services"""

from .cart_service import CartService
from .catalog_service import CatalogService, SimulatedCatalogSource
from .checkout_service import CheckoutService
from .order_service import OrderService, OrderStateMachine
from .payment_service import PaymentService
from .profile_service import ProfileService
from .review_service import ReviewService
from .storage import InMemoryKeyValueStore, SQLKeyValueStore
from .wishlist_service import WishlistService

__all__ = [
    "CartService",
    "CatalogService",
    "SimulatedCatalogSource",
    "CheckoutService",
    "OrderService",
    "OrderStateMachine",
    "PaymentService",
    "ProfileService",
    "ReviewService",
    "InMemoryKeyValueStore",
    "SQLKeyValueStore",
    "WishlistService",
]
