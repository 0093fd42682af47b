"""
Review ledger
One review per product; a new review for the same product replaces the old one
"""

from typing import Iterable, List, Optional
import logging

from storefront.core.events import EventBus, EventType
from storefront.schemas.order import Order, OrderItem
from storefront.schemas.user import ProductReview
from storefront.utils.validators import normalize_text, sanitize_html, validate_rating

logger = logging.getLogger(__name__)


class ReviewService:

    def __init__(self, events: Optional[EventBus] = None):
        self.events = events or EventBus()
        self.product_reviews: List[ProductReview] = []

    def add_review(
        self,
        product_id: str,
        product_name: str,
        rating: int,
        review_text: str = "",
        order_number: Optional[str] = None,
    ) -> ProductReview:
        """
        Insert or replace the review for a product

        Args:
            product_id: Reviewed product
            product_name: Name shown with the review
            rating: Whole stars from 1 to 5
            review_text: Free text; markup is stripped
            order_number: Order the product was bought in

        Returns:
            The stored review

        Raises:
            ValidationError: If rating is out of range
        """
        review = ProductReview(
            product_id=product_id,
            product_name=product_name,
            rating=validate_rating(rating),
            review_text=normalize_text(sanitize_html(review_text or "")),
            order_number=order_number,
        )

        # Remove existing review for this product if any
        self.product_reviews = [r for r in self.product_reviews if r.product_id != product_id]
        self.product_reviews.append(review)

        logger.info(f"Review saved for product {product_id} ({rating} stars)")
        self.events.publish(EventType.REVIEW_SAVED, product_id=product_id, rating=rating)
        return review

    def get_review(self, product_id: str) -> Optional[ProductReview]:
        return next((r for r in self.product_reviews if r.product_id == product_id), None)

    def has_reviewed(self, product_id: str) -> bool:
        return any(r.product_id == product_id for r in self.product_reviews)

    def get_reviewable_products(self, orders: Iterable[Order]) -> List[OrderItem]:
        """
        Ordered items whose product has no review yet

        A product ordered in several orders appears once per order item.
        """
        return [
            item
            for order in orders
            for item in order.items
            if not self.has_reviewed(item.product_id)
        ]
