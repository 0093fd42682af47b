"""
Domain event bus
Services publish state changes; the boundary layer subscribes to react
"""

from collections import defaultdict
from enum import Enum
from typing import Any, Callable, Dict, List
import logging

logger = logging.getLogger(__name__)

Subscriber = Callable[[str, Dict[str, Any]], None]


class EventType(str, Enum):
    CATALOG_LOADED = "catalog.loaded"
    CATALOG_FAILED = "catalog.failed"
    CART_UPDATED = "cart.updated"
    ORDER_PLACED = "order.placed"
    ORDER_STATUS_CHANGED = "order.status_changed"
    PROFILE_SAVED = "profile.saved"
    PAYMENT_METHODS_UPDATED = "payment_methods.updated"
    WISHLIST_UPDATED = "wishlist.updated"
    REVIEW_SAVED = "review.saved"


class EventBus:
    """Synchronous publish/subscribe channel for domain events"""

    def __init__(self):
        self._subscribers: Dict[str, List[Subscriber]] = defaultdict(list)

    def subscribe(self, event: str, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback for an event name ("*" receives every event)

        Returns:
            Function that removes the subscription
        """
        self._subscribers[event].append(callback)

        def unsubscribe():
            if callback in self._subscribers[event]:
                self._subscribers[event].remove(callback)

        return unsubscribe

    def publish(self, event: str, **payload: Any) -> None:
        """Deliver an event to its subscribers, then to wildcard subscribers"""
        name = event.value if isinstance(event, EventType) else event
        callbacks = list(self._subscribers.get(name, [])) + list(self._subscribers.get("*", []))

        for callback in callbacks:
            try:
                callback(name, payload)
            except Exception as e:
                logger.error(f"Event subscriber failed for {name}: {e}")
