"""
Storefront state aggregate

Built once at application start and handed to every consumer.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional
import logging

from storefront.core.config import Settings, get_settings
from storefront.core.events import EventBus
from storefront.schemas.user import PaymentMethod
from storefront.services.cart_service import CartService
from storefront.services.catalog_service import CatalogService, CatalogSource, SimulatedCatalogSource
from storefront.services.checkout_service import CheckoutService
from storefront.services.order_service import OrderService
from storefront.services.payment_service import PaymentService
from storefront.services.profile_service import ProfileService
from storefront.services.review_service import ReviewService
from storefront.services.storage import InMemoryKeyValueStore, KeyValueStore
from storefront.services.wishlist_service import WishlistService

logger = logging.getLogger(__name__)


@dataclass
class StorefrontState:
    """All domain state for the single local session"""

    catalog: CatalogService
    cart: CartService
    payments: PaymentService
    wishlist: WishlistService
    reviews: ReviewService
    orders: OrderService
    profile: ProfileService
    checkout: CheckoutService
    events: EventBus = field(default_factory=EventBus)


def build_state(
    settings: Optional[Settings] = None,
    store: Optional[KeyValueStore] = None,
    catalog_source: Optional[CatalogSource] = None,
    payment_methods: Optional[Iterable[PaymentMethod]] = None,
) -> StorefrontState:
    """Wire the services together around one event bus"""
    settings = settings or get_settings()
    events = EventBus()

    source = catalog_source or SimulatedCatalogSource(
        delay=settings.CATALOG_LOAD_DELAY,
        failure_rate=settings.CATALOG_FAILURE_RATE,
    )

    cart = CartService(events=events, currency=settings.CURRENCY)
    payments = PaymentService(methods=payment_methods, events=events)
    orders = OrderService(
        events=events,
        order_number_prefix=settings.ORDER_NUMBER_PREFIX,
        reject_out_of_stock=settings.REJECT_OUT_OF_STOCK_CHECKOUT,
    )
    profile = ProfileService(
        store=store if store is not None else InMemoryKeyValueStore(),
        storage_key=settings.PROFILE_STORAGE_KEY,
        events=events,
    )

    state = StorefrontState(
        catalog=CatalogService(source, events=events),
        cart=cart,
        payments=payments,
        wishlist=WishlistService(events=events),
        reviews=ReviewService(events=events),
        orders=orders,
        profile=profile,
        checkout=CheckoutService(
            cart=cart,
            orders=orders,
            payments=payments,
            profile=profile,
            delay=settings.CHECKOUT_DELAY,
        ),
        events=events,
    )
    logger.debug("Storefront state initialized")
    return state
