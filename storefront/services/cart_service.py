"""
Cart service for managing cart operations
"""

from decimal import Decimal
from typing import Dict, List, Optional, Tuple
import logging

from storefront.core.events import EventBus, EventType
from storefront.core.exceptions import CheckoutInProgressError
from storefront.schemas.cart import CartLine, CartTotals
from storefront.schemas.order import OrderItem
from storefront.schemas.product import Product
from storefront.utils.helpers import format_currency

logger = logging.getLogger(__name__)


class CartService:
    """
    Shopping cart held in memory for the session

    Lines are keyed by product id and keep insertion order. A line never
    holds a quantity below 1; reaching zero removes it. The cart is read-only
    while a checkout is pending.
    """

    def __init__(self, events: Optional[EventBus] = None, currency: str = "USD"):
        self.events = events or EventBus()
        self.currency = currency
        self._lines: Dict[str, CartLine] = {}
        self.checkout_pending = False

    def _ensure_editable(self) -> None:
        if self.checkout_pending:
            raise CheckoutInProgressError("The cart cannot change while checkout is in progress")

    def _changed(self, product_id: Optional[str] = None) -> None:
        self.events.publish(
            EventType.CART_UPDATED,
            product_id=product_id,
            item_count=self.item_count,
        )

    def add_to_cart(self, product: Product) -> CartLine:
        """Add one unit, creating the line if needed"""
        self._ensure_editable()
        line = self._lines.get(product.id)
        if line:
            line.quantity += 1
        else:
            line = CartLine(product=product, quantity=1)
            self._lines[product.id] = line

        logger.debug(f"Added {product.name} to cart (qty {line.quantity})")
        self._changed(product.id)
        return line

    def remove_from_cart(self, product: Product) -> None:
        """Remove one unit; the last unit removes the line"""
        self._ensure_editable()
        line = self._lines.get(product.id)
        if not line:
            return

        if line.quantity > 1:
            line.quantity -= 1
        else:
            del self._lines[product.id]

        self._changed(product.id)

    def remove_all_instances(self, product: Product) -> None:
        """Drop the line for a product whatever its quantity"""
        self._ensure_editable()
        if self._lines.pop(product.id, None) is not None:
            self._changed(product.id)

    def update_quantity(self, product: Product, quantity: int) -> Optional[CartLine]:
        """
        Set the quantity of a product

        Zero or negative quantities remove the line.
        """
        self._ensure_editable()
        if quantity <= 0:
            self.remove_all_instances(product)
            return None

        line = self._lines.get(product.id)
        if line:
            line.quantity = quantity
        else:
            line = CartLine(product=product, quantity=quantity)
            self._lines[product.id] = line

        self._changed(product.id)
        return line

    def clear_cart(self) -> None:
        """Clear all items from the cart"""
        self._ensure_editable()
        if self._lines:
            self._lines.clear()
            self._changed()

    @property
    def items(self) -> List[CartLine]:
        """Copies of the lines in insertion order"""
        return [line.model_copy() for line in self._lines.values()]

    @property
    def total(self) -> Decimal:
        return sum(
            (line.product.price * line.quantity for line in self._lines.values()),
            Decimal("0"),
        )

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    @property
    def unique_item_count(self) -> int:
        return len(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def is_in_cart(self, product: Product) -> bool:
        return product.id in self._lines

    def quantity_for(self, product: Product) -> int:
        line = self._lines.get(product.id)
        return line.quantity if line else 0

    def snapshot(self) -> Tuple[OrderItem, ...]:
        """Immutable copies of the lines with prices captured now"""
        return tuple(
            OrderItem(
                product_id=line.product.id,
                product_name=line.product.name,
                price=line.product.price,
                quantity=line.quantity,
                image_name=line.product.image_name or None,
            )
            for line in self._lines.values()
        )

    def get_cart_totals(self) -> CartTotals:
        """Calculate cart totals"""
        total = self.total
        return CartTotals(
            items=self.items,
            total=total,
            item_count=self.item_count,
            unique_item_count=self.unique_item_count,
            formatted_total=format_currency(total, self.currency),
        )
