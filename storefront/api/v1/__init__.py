"""API v1 routes aggregation"""

from fastapi import APIRouter

from .products import router as products_router
from .cart import router as cart_router
from .orders import router as orders_router
from .profile import router as profile_router

# Create v1 router
api_router = APIRouter()

# Include all routers
api_router.include_router(products_router, prefix="/products", tags=["Products"])
api_router.include_router(cart_router, prefix="/cart", tags=["Cart"])
api_router.include_router(orders_router, tags=["Orders"])
api_router.include_router(profile_router, tags=["Profile"])

# Export router
router = api_router
