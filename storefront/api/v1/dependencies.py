"""Shared router dependencies"""

from fastapi import Depends, Request

from storefront.core.config import Settings, get_settings
from storefront.schemas.product import Product
from storefront.state import StorefrontState


def get_state(request: Request) -> StorefrontState:
    """Domain state built during application startup"""
    return request.app.state.storefront


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def get_product(product_id: str, state: StorefrontState = Depends(get_state)) -> Product:
    """Resolve a product id from the path against the catalog"""
    return state.catalog.require_product(product_id)
