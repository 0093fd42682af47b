"""
Cart schemas
"""

from decimal import Decimal
from typing import List

from pydantic import Field, computed_field

from .base import BaseSchema
from .product import Product


class CartLine(BaseSchema):
    """One product and its quantity within the cart"""

    product: Product
    quantity: int = Field(..., ge=1, description="Quantity")

    @computed_field
    @property
    def total_price(self) -> Decimal:
        return self.product.price * self.quantity


class CartTotals(BaseSchema):
    """Summary of the cart used by the cart screen and checkout"""

    items: List[CartLine] = Field(default_factory=list)
    total: Decimal = Decimal("0")
    item_count: int = 0
    unique_item_count: int = 0
    formatted_total: str = ""
