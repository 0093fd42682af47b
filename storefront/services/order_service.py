"""Order book: order placement from the cart and status transitions"""

from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Set
import itertools
import logging

from storefront.core.events import EventBus, EventType
from storefront.core.exceptions import (
    CartError,
    InvalidStatusTransitionError,
    NotFoundException,
    OutOfStockError,
)
from storefront.schemas.order import Order, OrderStatus
from storefront.schemas.user import PaymentMethod
from storefront.services.cart_service import CartService
from storefront.utils.helpers import generate_order_number, utcnow

logger = logging.getLogger(__name__)


class OrderStateMachine:
    """Order state machine for status transitions"""

    TRANSITIONS: Dict[OrderStatus, Set[OrderStatus]] = {
        OrderStatus.PENDING: {OrderStatus.PROCESSING, OrderStatus.CANCELLED},
        OrderStatus.PROCESSING: {OrderStatus.SHIPPED, OrderStatus.CANCELLED},
        OrderStatus.SHIPPED: {OrderStatus.DELIVERED, OrderStatus.CANCELLED},
        OrderStatus.DELIVERED: set(),
        OrderStatus.CANCELLED: set(),
    }

    @classmethod
    def can_transition(cls, from_status: OrderStatus, to_status: OrderStatus) -> bool:
        """Check if transition is valid"""
        return to_status in cls.TRANSITIONS.get(from_status, set())

    @classmethod
    def get_available_transitions(cls, current_status: OrderStatus) -> List[OrderStatus]:
        """Get available transitions from current status"""
        return sorted(cls.TRANSITIONS.get(current_status, set()), key=lambda s: s.value)

    @classmethod
    def is_terminal_state(cls, status: OrderStatus) -> bool:
        return not cls.TRANSITIONS.get(status)


class OrderService:
    """
    Append-only log of placed orders

    Orders are immutable records; a status change stores a copy carrying
    the new status in the same position.
    """

    def __init__(
        self,
        events: Optional[EventBus] = None,
        order_number_prefix: str = "ORD",
        reject_out_of_stock: bool = True,
        orders: Optional[Iterable[Order]] = None,
    ):
        self.events = events or EventBus()
        self.order_number_prefix = order_number_prefix
        self.reject_out_of_stock = reject_out_of_stock
        self.state_machine = OrderStateMachine()
        self._orders: List[Order] = list(orders or [])
        self._issued_numbers: Set[str] = {o.order_number for o in self._orders}
        self._sequence = itertools.count(len(self._orders) + 1)

    @property
    def orders(self) -> List[Order]:
        return list(self._orders)

    @property
    def total_orders(self) -> int:
        return len(self._orders)

    def _generate_order_number(self) -> str:
        """Generate unique order number"""
        while True:
            number = generate_order_number(self.order_number_prefix, next(self._sequence))
            if number not in self._issued_numbers:
                return number

    def place_order(
        self,
        cart: CartService,
        payment_method: Optional[PaymentMethod],
        shipping_address: str,
    ) -> Order:
        """
        Convert the cart into an order, record it and clear the cart

        Nothing is recorded and the cart is untouched when validation fails.

        Raises:
            CartError: Empty cart or no payment method
            OutOfStockError: Cart holds an unavailable product
        """
        if payment_method is None:
            raise CartError("Select a payment method to place the order", error_code="PAYMENT_METHOD_REQUIRED")

        if cart.is_empty:
            raise CartError("Cannot place an order with an empty cart", error_code="EMPTY_CART")

        if self.reject_out_of_stock:
            for line in cart.items:
                if not line.product.in_stock:
                    raise OutOfStockError(line.product.name)

        items = cart.snapshot()
        order_number = self._generate_order_number()

        order = Order(
            order_number=order_number,
            date=utcnow(),
            status=OrderStatus.PENDING,
            total_amount=sum((item.total_price for item in items), Decimal("0")),
            items=items,
            shipping_address=shipping_address,
            payment_method=payment_method.masked_card_number,
        )

        self._orders.append(order)
        self._issued_numbers.add(order_number)
        cart.clear_cart()

        logger.info(f"Order {order_number} placed: {len(items)} lines, total {order.total_amount}")
        self.events.publish(
            EventType.ORDER_PLACED,
            order_number=order_number,
            total_amount=str(order.total_amount),
        )
        return order

    def get_order(self, order_number: str) -> Optional[Order]:
        return next((o for o in self._orders if o.order_number == order_number), None)

    def orders_by_status(self, status: OrderStatus) -> List[Order]:
        return [o for o in self._orders if o.status == status]

    def update_order_status(self, order_number: str, new_status: OrderStatus) -> Order:
        """Update order status with state machine validation"""
        for index, order in enumerate(self._orders):
            if order.order_number == order_number:
                break
        else:
            raise NotFoundException(f"Order {order_number} not found", error_code="ORDER_NOT_FOUND")

        if not self.state_machine.can_transition(order.status, new_status):
            raise InvalidStatusTransitionError(order.status.value, new_status.value)

        updated = order.model_copy(update={"status": new_status})
        self._orders[index] = updated

        logger.info(f"Order {order_number} moved from {order.status.value} to {new_status.value}")
        self.events.publish(
            EventType.ORDER_STATUS_CHANGED,
            order_number=order_number,
            status=new_status.value,
        )
        return updated
