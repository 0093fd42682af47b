"""Request and response bodies for the v1 API"""

from typing import List, Optional

from pydantic import BaseModel, Field

from storefront.schemas.order import OrderItem, OrderStatus
from storefront.schemas.product import Product


class ProductRef(BaseModel):
    product_id: str = Field(..., description="Product ID")


class QuantityUpdate(BaseModel):
    quantity: int = Field(..., description="New quantity; zero or less removes the item")


class CatalogStatus(BaseModel):
    is_loading: bool
    product_count: int
    error: Optional[dict] = None


class ProductList(BaseModel):
    products: List[Product]
    count: int


class CheckoutRequest(BaseModel):
    payment_method_id: Optional[str] = Field(None, description="Defaults to the default payment method")


class OrderStatusUpdate(BaseModel):
    status: OrderStatus = Field(..., description="New order status")


class ReviewCreate(BaseModel):
    product_name: str
    rating: int = Field(..., description="Whole stars from 1 to 5")
    review_text: str = ""
    order_number: Optional[str] = None


class ReviewableItems(BaseModel):
    items: List[OrderItem]
    count: int
