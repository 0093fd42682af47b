"""Wishlist of saved products, unique by product id"""

from decimal import Decimal
from typing import List, Optional
import logging

from storefront.core.events import EventBus, EventType
from storefront.schemas.product import Product
from storefront.schemas.user import WishlistItem

logger = logging.getLogger(__name__)


class WishlistService:

    def __init__(self, events: Optional[EventBus] = None):
        self.events = events or EventBus()
        self.wishlist_items: List[WishlistItem] = []

    def add_to_wishlist(
        self,
        product_id: str,
        product_name: str,
        price: Decimal,
        image_name: str = "",
        category: str = "general",
    ) -> WishlistItem:
        """Save a product; an existing entry is returned unchanged"""
        existing = self.get_item(product_id)
        if existing:
            return existing

        item = WishlistItem(
            product_id=product_id,
            product_name=product_name,
            price=price,
            image_name=image_name,
            category=category,
        )
        self.wishlist_items.append(item)
        self.events.publish(EventType.WISHLIST_UPDATED, product_id=product_id, added=True)
        return item

    def add_product(self, product: Product) -> WishlistItem:
        return self.add_to_wishlist(
            product_id=product.id,
            product_name=product.name,
            price=product.price,
            image_name=product.image_name,
            category=product.category.value,
        )

    def remove_from_wishlist(self, product_id: str) -> None:
        before = len(self.wishlist_items)
        self.wishlist_items = [i for i in self.wishlist_items if i.product_id != product_id]

        if len(self.wishlist_items) != before:
            self.events.publish(EventType.WISHLIST_UPDATED, product_id=product_id, added=False)

    def is_in_wishlist(self, product_id: str) -> bool:
        return any(item.product_id == product_id for item in self.wishlist_items)

    def get_item(self, product_id: str) -> Optional[WishlistItem]:
        return next((i for i in self.wishlist_items if i.product_id == product_id), None)
