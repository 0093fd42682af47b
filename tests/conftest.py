"""Pytest fixtures for storefront tests."""

import asyncio
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from storefront.core.config import Settings
from storefront.main import create_app
from storefront.schemas.product import Product, ProductCategory
from storefront.schemas.user import PaymentMethod
from storefront.services.catalog_service import SimulatedCatalogSource
from storefront.services.storage import InMemoryKeyValueStore
from storefront.state import build_state


@pytest.fixture
def settings():
    """Settings with no simulated latency or failures."""
    return Settings(
        DATABASE_URL="sqlite://",
        CATALOG_LOAD_DELAY=0,
        CATALOG_FAILURE_RATE=0,
        CHECKOUT_DELAY=0,
    )


@pytest.fixture
def product_a():
    return Product(
        id="prod-a",
        name="Running Shoe",
        description="Lightweight running shoe with breathable mesh upper.",
        price=Decimal("10.00"),
        image_name="figure.walk",
        category=ProductCategory.SHOES,
    )


@pytest.fixture
def product_b():
    return Product(
        id="prod-b",
        name="Cloud Jacket",
        description="Running jacket with weather protection.",
        price=Decimal("25.00"),
        image_name="cloud.rain",
        category=ProductCategory.CLOTHING,
    )


@pytest.fixture
def out_of_stock_product():
    return Product(
        id="prod-oos",
        name="Performance Shorts",
        description="Moisture-wicking shorts.",
        price=Decimal("49.99"),
        category=ProductCategory.CLOTHING,
        in_stock=False,
    )


@pytest.fixture
def catalog_products(product_a, product_b, out_of_stock_product):
    return [product_a, product_b, out_of_stock_product]


@pytest.fixture
def card():
    return PaymentMethod(
        card_number="1234567890123456",
        cardholder_name="John Doe",
        expiry_date="12/25",
        is_default=True,
    )


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def state(settings, store, catalog_products, card):
    """Domain state with a loaded catalog and one default card."""
    state = build_state(
        settings=settings,
        store=store,
        catalog_source=SimulatedCatalogSource(catalog_products, delay=0, failure_rate=0),
        payment_methods=[card],
    )
    asyncio.run(state.catalog.load_products())
    return state


@pytest.fixture
def client(settings, store, catalog_products):
    """Test client running the app lifespan."""
    app = create_app(
        settings=settings,
        store=store,
        catalog_source=SimulatedCatalogSource(catalog_products, delay=0, failure_rate=0),
    )
    with TestClient(app) as test_client:
        yield test_client
