"""Checkout and order history endpoints"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from storefront.api.v1.dependencies import get_state
from storefront.api.v1.schemas import CheckoutRequest, OrderStatusUpdate
from storefront.core.exceptions import NotFoundException
from storefront.schemas.order import Order, OrderStatus
from storefront.state import StorefrontState

router = APIRouter()


@router.post("/checkout", response_model=Order, status_code=status.HTTP_201_CREATED)
async def checkout(
    request: CheckoutRequest,
    state: StorefrontState = Depends(get_state),
):
    """Place an order for the current cart"""
    return await state.checkout.checkout(payment_method_id=request.payment_method_id)


@router.get("/orders", response_model=List[Order])
async def list_orders(
    order_status: Optional[OrderStatus] = Query(None, alias="status"),
    state: StorefrontState = Depends(get_state),
):
    """Order history, oldest first"""
    if order_status:
        return state.orders.orders_by_status(order_status)
    return state.orders.orders


@router.get("/orders/{order_number}", response_model=Order)
async def get_order(order_number: str, state: StorefrontState = Depends(get_state)):
    order = state.orders.get_order(order_number)
    if not order:
        raise NotFoundException(f"Order {order_number} not found", error_code="ORDER_NOT_FOUND")
    return order


@router.patch("/orders/{order_number}/status", response_model=Order)
async def update_order_status(
    order_number: str,
    update: OrderStatusUpdate,
    state: StorefrontState = Depends(get_state),
):
    """Advance or cancel an order following the status state machine"""
    return state.orders.update_order_status(order_number, update.status)
