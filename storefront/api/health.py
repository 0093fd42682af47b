"""Health check endpoints"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from storefront.api.v1.dependencies import get_state
from storefront.state import StorefrontState

router = APIRouter()


@router.get("/health")
async def health_check(state: StorefrontState = Depends(get_state)):
    """Basic health check with catalog state"""
    catalog = state.catalog
    return {
        "status": "degraded" if catalog.error else "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "components": {
            "catalog": {
                "products": len(catalog.products),
                "is_loading": catalog.is_loading,
                "error": catalog.error.detail if catalog.error else None,
            },
            "checkout": {"processing": state.checkout.is_processing},
        },
    }
