"""Profile, payment method, wishlist and review endpoints"""

from typing import List

from fastapi import APIRouter, Depends, status

from storefront.api.v1.dependencies import get_state
from storefront.api.v1.schemas import ProductRef, ReviewableItems, ReviewCreate
from storefront.core.exceptions import NotFoundException
from storefront.schemas.user import (
    PaymentMethod,
    PaymentMethodCreate,
    ProductReview,
    ProfileUpdate,
    UserProfile,
    WishlistItem,
)
from storefront.services.payment_service import PaymentService
from storefront.state import StorefrontState

router = APIRouter()


# Profile
@router.get("/profile", response_model=UserProfile)
async def get_profile(state: StorefrontState = Depends(get_state)):
    return state.profile.profile


@router.put("/profile", response_model=UserProfile)
async def update_profile(data: ProfileUpdate, state: StorefrontState = Depends(get_state)):
    """Edit contact details; saved immediately"""
    return state.profile.update_profile(data)


# Payment methods
@router.get("/payment-methods", response_model=List[PaymentMethod])
async def list_payment_methods(state: StorefrontState = Depends(get_state)):
    return state.payments.payment_methods


@router.post("/payment-methods", response_model=PaymentMethod, status_code=status.HTTP_201_CREATED)
async def add_payment_method(data: PaymentMethodCreate, state: StorefrontState = Depends(get_state)):
    method = PaymentService.build_payment_method(data)
    return state.payments.add_payment_method(method)


@router.delete("/payment-methods/{index}", response_model=List[PaymentMethod])
async def remove_payment_method(index: int, state: StorefrontState = Depends(get_state)):
    state.payments.remove_payment_method(index)
    return state.payments.payment_methods


@router.post("/payment-methods/{index}/default", response_model=List[PaymentMethod])
async def set_default_payment_method(index: int, state: StorefrontState = Depends(get_state)):
    state.payments.set_default_payment_method(index)
    return state.payments.payment_methods


# Wishlist
@router.get("/wishlist", response_model=List[WishlistItem])
async def get_wishlist(state: StorefrontState = Depends(get_state)):
    return state.wishlist.wishlist_items


@router.post("/wishlist", response_model=List[WishlistItem])
async def add_to_wishlist(item: ProductRef, state: StorefrontState = Depends(get_state)):
    product = state.catalog.require_product(item.product_id)
    state.wishlist.add_product(product)
    return state.wishlist.wishlist_items


@router.delete("/wishlist/{product_id}", response_model=List[WishlistItem])
async def remove_from_wishlist(product_id: str, state: StorefrontState = Depends(get_state)):
    state.wishlist.remove_from_wishlist(product_id)
    return state.wishlist.wishlist_items


# Reviews
@router.get("/reviews", response_model=List[ProductReview])
async def list_reviews(state: StorefrontState = Depends(get_state)):
    return state.reviews.product_reviews


@router.get("/reviews/reviewable", response_model=ReviewableItems)
async def reviewable_items(state: StorefrontState = Depends(get_state)):
    """Ordered items still waiting for a review"""
    items = state.reviews.get_reviewable_products(state.orders.orders)
    return ReviewableItems(items=items, count=len(items))


@router.get("/reviews/{product_id}", response_model=ProductReview)
async def get_review(product_id: str, state: StorefrontState = Depends(get_state)):
    review = state.reviews.get_review(product_id)
    if not review:
        raise NotFoundException(f"No review for product {product_id}", error_code="REVIEW_NOT_FOUND")
    return review


@router.put("/reviews/{product_id}", response_model=ProductReview)
async def save_review(
    product_id: str,
    data: ReviewCreate,
    state: StorefrontState = Depends(get_state),
):
    """Create or replace the review for a product"""
    return state.reviews.add_review(
        product_id=product_id,
        product_name=data.product_name,
        rating=data.rating,
        review_text=data.review_text,
        order_number=data.order_number,
    )
