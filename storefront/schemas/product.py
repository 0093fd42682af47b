"""
Product schemas
"""

from decimal import Decimal
from enum import Enum
import uuid

from pydantic import Field

from .base import FrozenSchema


class ProductCategory(str, Enum):
    SHOES = "shoes"
    CLOTHING = "clothing"
    ACCESSORIES = "accessories"
    GENERAL = "general"


class Product(FrozenSchema):
    """Catalog product; never mutated after the catalog is loaded"""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="Product ID")
    name: str = Field(..., min_length=1, description="Product name")
    description: str = Field("", description="Product description")
    price: Decimal = Field(..., ge=0, description="Unit price")
    image_name: str = Field("", description="Image reference")
    category: ProductCategory = Field(ProductCategory.GENERAL, description="Category")
    in_stock: bool = Field(True, description="Available for ordering")
    rating: float = Field(0.0, ge=0, le=5, description="Average rating")
    review_count: int = Field(0, ge=0, description="Number of reviews")

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if isinstance(other, Product):
            return self.id == other.id
        return NotImplemented
