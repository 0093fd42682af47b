"""Cart router"""

from fastapi import APIRouter, Depends, Query

from storefront.api.v1.dependencies import get_app_settings, get_product, get_state
from storefront.api.v1.schemas import ProductRef, QuantityUpdate
from storefront.core.config import Settings
from storefront.schemas.cart import CartTotals
from storefront.schemas.product import Product
from storefront.state import StorefrontState
from storefront.utils.validators import validate_quantity

router = APIRouter()


@router.get("/", response_model=CartTotals)
async def get_cart(state: StorefrontState = Depends(get_state)):
    """Get cart lines and totals"""
    return state.cart.get_cart_totals()


@router.post("/items", response_model=CartTotals)
async def add_to_cart(
    item: ProductRef,
    state: StorefrontState = Depends(get_state),
):
    """Add one unit of a product"""
    product = state.catalog.require_product(item.product_id)
    state.cart.add_to_cart(product)
    return state.cart.get_cart_totals()


@router.put("/items/{product_id}", response_model=CartTotals)
async def update_cart_item(
    update: QuantityUpdate,
    product: Product = Depends(get_product),
    state: StorefrontState = Depends(get_state),
    settings: Settings = Depends(get_app_settings),
):
    """Set the quantity of a product; zero or less removes it"""
    if update.quantity > 0:
        validate_quantity(update.quantity, settings.MAX_ITEM_QUANTITY)
    state.cart.update_quantity(product, update.quantity)
    return state.cart.get_cart_totals()


@router.delete("/items/{product_id}", response_model=CartTotals)
async def remove_from_cart(
    remove_all: bool = Query(False, alias="all", description="Remove every unit"),
    product: Product = Depends(get_product),
    state: StorefrontState = Depends(get_state),
):
    """Remove one unit, or the whole line with ?all=true"""
    if remove_all:
        state.cart.remove_all_instances(product)
    else:
        state.cart.remove_from_cart(product)
    return state.cart.get_cart_totals()


@router.delete("/", response_model=CartTotals)
async def clear_cart(state: StorefrontState = Depends(get_state)):
    """Clear entire cart"""
    state.cart.clear_cart()
    return state.cart.get_cart_totals()
