"""
Checkout service
Serializes checkout requests and runs the order placement after the
simulated processing delay
"""

from typing import Optional
import asyncio
import logging

from storefront.core.exceptions import CartError, CheckoutInProgressError
from storefront.schemas.order import Order
from storefront.services.cart_service import CartService
from storefront.services.order_service import OrderService
from storefront.services.payment_service import PaymentService
from storefront.services.profile_service import ProfileService

logger = logging.getLogger(__name__)


class CheckoutService:

    def __init__(
        self,
        cart: CartService,
        orders: OrderService,
        payments: PaymentService,
        profile: ProfileService,
        delay: float = 2.0,
    ):
        self.cart = cart
        self.orders = orders
        self.payments = payments
        self.profile = profile
        self.delay = delay
        self._lock = asyncio.Lock()

    def _hold(self, pending: bool) -> None:
        self.cart.checkout_pending = pending
        self.payments.checkout_pending = pending

    @property
    def is_processing(self) -> bool:
        return self._lock.locked()

    async def checkout(self, payment_method_id: Optional[str] = None) -> Order:
        """
        Place an order for the current cart

        Uses the given payment method, or the default one when no id is
        passed. A second call while one is running is rejected, and so are
        cart and payment method changes until the order is placed.
        Cancelling during the delay leaves the cart and the order book
        untouched.

        Raises:
            CheckoutInProgressError: Another checkout is running
            CartError: Unknown payment method, empty cart
        """
        if self._lock.locked():
            raise CheckoutInProgressError()

        async with self._lock:
            if payment_method_id:
                payment_method = self.payments.get_payment_method(payment_method_id)
                if payment_method is None:
                    raise CartError(
                        f"Payment method {payment_method_id} not found",
                        error_code="PAYMENT_METHOD_NOT_FOUND"
                    )
            else:
                payment_method = self.payments.default_payment_method

            logger.info(f"Processing checkout for {self.cart.item_count} items")

            self._hold(True)
            try:
                # Simulate payment processing latency
                if self.delay > 0:
                    await asyncio.sleep(self.delay)
            finally:
                self._hold(False)

            # No await below this point: placement runs as one unit
            return self.orders.place_order(
                cart=self.cart,
                payment_method=payment_method,
                shipping_address=self.profile.profile.address,
            )
