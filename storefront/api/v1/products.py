"""Catalog endpoints: listing, search and reload"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from storefront.api.v1.dependencies import get_product, get_state
from storefront.api.v1.schemas import CatalogStatus, ProductList
from storefront.schemas.product import Product, ProductCategory
from storefront.state import StorefrontState

router = APIRouter()


def _catalog_status(state: StorefrontState) -> CatalogStatus:
    catalog = state.catalog
    return CatalogStatus(
        is_loading=catalog.is_loading,
        product_count=len(catalog.products),
        error=catalog.error.to_dict() if catalog.error else None,
    )


@router.get("/", response_model=ProductList)
async def list_products(
    q: str = Query("", description="Case-insensitive search over name and description"),
    category: Optional[ProductCategory] = Query(None),
    state: StorefrontState = Depends(get_state),
):
    """List or search the catalog"""
    products = state.catalog.search_products(q, category)
    return ProductList(products=products, count=len(products))


@router.get("/status", response_model=CatalogStatus)
async def catalog_status(state: StorefrontState = Depends(get_state)):
    """Loading flag and last load error, if any"""
    return _catalog_status(state)


@router.post("/refresh", response_model=CatalogStatus)
async def refresh_products(state: StorefrontState = Depends(get_state)):
    """Reload the catalog; also the retry for a failed load"""
    await state.catalog.refresh_products()
    return _catalog_status(state)


@router.get("/{product_id}", response_model=Product)
async def get_product_detail(product: Product = Depends(get_product)):
    return product
