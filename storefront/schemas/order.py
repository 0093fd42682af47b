"""Order schemas"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple
import uuid

from pydantic import Field, computed_field

from .base import FrozenSchema


class OrderStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class OrderItem(FrozenSchema):
    """Snapshot of a cart line taken when the order was placed"""

    product_id: str
    product_name: str
    price: Decimal = Field(..., ge=0)
    quantity: int = Field(..., ge=1)
    image_name: Optional[str] = None

    @computed_field
    @property
    def total_price(self) -> Decimal:
        return self.price * self.quantity


class Order(FrozenSchema):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    order_number: str
    date: datetime
    status: OrderStatus = OrderStatus.PENDING
    total_amount: Decimal
    items: Tuple[OrderItem, ...]
    shipping_address: str
    payment_method: str

    @computed_field
    @property
    def items_count(self) -> int:
        return sum(item.quantity for item in self.items)
