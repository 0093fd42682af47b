"""Catalog service: product loading, lookup and search"""

from decimal import Decimal
from typing import List, Optional, Protocol, Sequence
import asyncio
import logging
import random

from storefront.core.events import EventBus, EventType
from storefront.core.exceptions import NetworkError, ProductError, StorefrontException
from storefront.schemas.product import Product, ProductCategory

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS: List[Product] = [
    Product(
        name="Running Shoe",
        description="Lightweight running shoe with breathable mesh upper and responsive cushioning.",
        price=Decimal("129.99"),
        image_name="figure.walk",
        category=ProductCategory.SHOES,
        rating=4.5,
        review_count=128,
    ),
    Product(
        name="Trail Shoe",
        description="Durable trail running shoe with aggressive tread pattern and waterproof protection.",
        price=Decimal("149.99"),
        image_name="hare",
        category=ProductCategory.SHOES,
        rating=4.8,
        review_count=89,
    ),
    Product(
        name="Cloud Jacket",
        description="Lightweight running jacket with weather protection and breathable fabric.",
        price=Decimal("99.99"),
        image_name="cloud.rain",
        category=ProductCategory.CLOTHING,
        rating=4.2,
        review_count=67,
    ),
    Product(
        name="Performance Shorts",
        description="Moisture-wicking shorts with built-in compression for optimal performance.",
        price=Decimal("49.99"),
        image_name="figure.run",
        category=ProductCategory.CLOTHING,
        in_stock=False,
        rating=4.0,
        review_count=45,
    ),
    Product(
        name="Hydration Pack",
        description="Lightweight hydration pack with 2L capacity and multiple storage compartments.",
        price=Decimal("79.99"),
        image_name="drop.fill",
        category=ProductCategory.ACCESSORIES,
        rating=4.7,
        review_count=156,
    ),
]


class CatalogSource(Protocol):
    async def fetch_products(self) -> List[Product]:
        ...


class SimulatedCatalogSource:
    """
    Catalog source standing in for a remote product API

    Waits for `delay` seconds and fails with NetworkError at `failure_rate`.
    """

    def __init__(
        self,
        products: Optional[Sequence[Product]] = None,
        delay: float = 0.5,
        failure_rate: float = 0.1,
        rng: Optional[random.Random] = None,
    ):
        self.products = list(SAMPLE_PRODUCTS if products is None else products)
        self.delay = delay
        self.failure_rate = failure_rate
        self.rng = rng or random.Random()

    async def fetch_products(self) -> List[Product]:
        if self.delay > 0:
            await asyncio.sleep(self.delay)

        if self.rng.random() < self.failure_rate:
            raise NetworkError("Failed to load products")

        return list(self.products)


class CatalogService:
    """Holds the current catalog and exposes lookup and search"""

    def __init__(self, source: CatalogSource, events: Optional[EventBus] = None):
        self.source = source
        self.events = events or EventBus()
        self.products: List[Product] = []
        self.is_loading = False
        self.error: Optional[StorefrontException] = None

    async def load_products(self) -> bool:
        """
        Load the catalog from the source

        Failures are kept in `error` for the caller to offer a retry;
        the previous catalog stays in place.

        Returns:
            True if the catalog was replaced
        """
        self.is_loading = True
        self.error = None

        try:
            products = await self.source.fetch_products()
        except StorefrontException as e:
            self.error = e
            logger.error(f"Error in CatalogService.load_products: {e.detail}")
            self.events.publish(EventType.CATALOG_FAILED, error=e.to_dict())
            return False
        except Exception as e:
            self.error = NetworkError(f"Failed to load products: {e}", error_code="UNKNOWN_ERROR")
            logger.exception("Unexpected error in CatalogService.load_products")
            self.events.publish(EventType.CATALOG_FAILED, error=self.error.to_dict())
            return False
        finally:
            self.is_loading = False

        self.products = products
        logger.info(f"Catalog loaded with {len(products)} products")
        self.events.publish(EventType.CATALOG_LOADED, count=len(products))
        return True

    async def refresh_products(self) -> bool:
        """Reload the catalog; same as retrying a failed load"""
        return await self.load_products()

    def get_product(self, product_id: str) -> Optional[Product]:
        """Gets a product by its ID"""
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    def require_product(self, product_id: str) -> Product:
        product = self.get_product(product_id)
        if product is None:
            raise ProductError(f"Product {product_id} not found")
        return product

    def search_products(self, query: str, category: Optional[ProductCategory] = None) -> List[Product]:
        """
        Case-insensitive substring match on name or description

        An empty query returns the full catalog, or the whole category
        when one is given.
        """
        products = self.products_by_category(category) if category else list(self.products)
        if not query:
            return products

        needle = query.casefold()
        return [
            product for product in products
            if needle in product.name.casefold() or needle in product.description.casefold()
        ]

    def products_by_category(self, category: ProductCategory) -> List[Product]:
        return [product for product in self.products if product.category == category]
