"""
Payment method registry
Stored cards with a single default used to pre-select checkout payment
"""

from typing import Iterable, List, Optional
import logging

from storefront.core.events import EventBus, EventType
from storefront.core.exceptions import CheckoutInProgressError
from storefront.schemas.user import PaymentMethod, PaymentMethodCreate
from storefront.utils.validators import (
    validate_card_number,
    validate_expiry_date,
    validate_required,
)

logger = logging.getLogger(__name__)


class PaymentService:
    """
    Holds payment methods in display order

    At most one method has is_default set at any time.
    The list cannot change while a checkout is pending.
    """

    def __init__(
        self,
        methods: Optional[Iterable[PaymentMethod]] = None,
        events: Optional[EventBus] = None,
    ):
        self.events = events or EventBus()
        self.payment_methods: List[PaymentMethod] = []
        self.checkout_pending = False
        for method in methods or []:
            self.add_payment_method(method, notify=False)

    def _ensure_editable(self) -> None:
        if self.checkout_pending:
            raise CheckoutInProgressError("Payment methods cannot change while checkout is in progress")

    def _clear_defaults(self) -> None:
        for method in self.payment_methods:
            method.is_default = False

    def _changed(self) -> None:
        self.events.publish(
            EventType.PAYMENT_METHODS_UPDATED,
            count=len(self.payment_methods),
            default_index=self.default_index,
        )

    @staticmethod
    def build_payment_method(data: PaymentMethodCreate) -> PaymentMethod:
        """Validate user input and build a payment method"""
        return PaymentMethod(
            card_number=validate_card_number(data.card_number),
            cardholder_name=validate_required(data.cardholder_name, "Cardholder name"),
            expiry_date=validate_expiry_date(data.expiry_date),
            is_default=data.is_default,
        )

    def add_payment_method(self, method: PaymentMethod, notify: bool = True) -> PaymentMethod:
        """Append a method; a new default replaces the previous one"""
        self._ensure_editable()
        if method.is_default:
            self._clear_defaults()

        self.payment_methods.append(method)
        logger.info(f"Payment method {method.masked_card_number} added")

        if notify:
            self._changed()
        return method

    def remove_payment_method(self, index: int) -> Optional[PaymentMethod]:
        """Remove by position; out of range is ignored"""
        self._ensure_editable()
        if not 0 <= index < len(self.payment_methods):
            logger.debug(f"Ignoring removal of payment method at index {index}")
            return None

        removed = self.payment_methods.pop(index)
        self._changed()
        return removed

    def set_default_payment_method(self, index: int) -> Optional[PaymentMethod]:
        """Make the method at index the only default; out of range is ignored"""
        self._ensure_editable()
        if not 0 <= index < len(self.payment_methods):
            logger.debug(f"Ignoring default change to index {index}")
            return None

        self._clear_defaults()
        method = self.payment_methods[index]
        method.is_default = True
        self._changed()
        return method

    @property
    def default_payment_method(self) -> Optional[PaymentMethod]:
        return next((m for m in self.payment_methods if m.is_default), None)

    @property
    def default_index(self) -> Optional[int]:
        for index, method in enumerate(self.payment_methods):
            if method.is_default:
                return index
        return None

    def get_payment_method(self, method_id: str) -> Optional[PaymentMethod]:
        return next((m for m in self.payment_methods if m.id == method_id), None)
