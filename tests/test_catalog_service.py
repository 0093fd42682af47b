"""Tests for catalog loading, lookup and search."""

import asyncio
import random

import pytest

from storefront.core.events import EventBus
from storefront.core.exceptions import NetworkError, ProductError
from storefront.schemas.product import ProductCategory
from storefront.services.catalog_service import (
    SAMPLE_PRODUCTS,
    CatalogService,
    SimulatedCatalogSource,
)


class FlakySource:
    """Fails a set number of times before returning products."""

    def __init__(self, products, failures=1, error=None):
        self.products = products
        self.failures = failures
        self.error = error or NetworkError()
        self.calls = 0

    async def fetch_products(self):
        self.calls += 1
        if self.calls <= self.failures:
            raise self.error
        return list(self.products)


@pytest.fixture
def catalog(catalog_products):
    catalog = CatalogService(SimulatedCatalogSource(catalog_products, delay=0, failure_rate=0))
    asyncio.run(catalog.load_products())
    return catalog


class TestLoading:
    def test_successful_load(self, catalog):
        assert len(catalog.products) == 3
        assert catalog.error is None
        assert catalog.is_loading is False

    def test_failure_is_captured_and_retryable(self, catalog_products):
        events = EventBus()
        seen = []
        events.subscribe("*", lambda name, payload: seen.append(name))
        catalog = CatalogService(FlakySource(catalog_products), events=events)

        assert asyncio.run(catalog.load_products()) is False
        assert isinstance(catalog.error, NetworkError)
        assert catalog.products == []

        assert asyncio.run(catalog.refresh_products()) is True
        assert catalog.error is None
        assert len(catalog.products) == 3
        assert seen == ["catalog.failed", "catalog.loaded"]

    def test_failed_refresh_keeps_previous_catalog(self, catalog_products):
        source = FlakySource(catalog_products, failures=0)
        catalog = CatalogService(source)
        asyncio.run(catalog.load_products())

        source.failures = 2
        assert asyncio.run(catalog.refresh_products()) is False
        assert len(catalog.products) == 3

    def test_unexpected_error_is_wrapped(self, catalog_products):
        catalog = CatalogService(FlakySource(catalog_products, error=RuntimeError("socket closed")))

        asyncio.run(catalog.load_products())
        assert isinstance(catalog.error, NetworkError)
        assert catalog.error.error_code == "UNKNOWN_ERROR"

    def test_simulated_source_failure_rate(self):
        always_fails = SimulatedCatalogSource(delay=0, failure_rate=1.0)
        with pytest.raises(NetworkError):
            asyncio.run(always_fails.fetch_products())

        never_fails = SimulatedCatalogSource(delay=0, failure_rate=0.0, rng=random.Random(7))
        assert len(asyncio.run(never_fails.fetch_products())) == len(SAMPLE_PRODUCTS)


class TestLookup:
    def test_get_product(self, catalog):
        assert catalog.get_product("prod-a").name == "Running Shoe"
        assert catalog.get_product("missing") is None

    def test_require_product(self, catalog):
        with pytest.raises(ProductError):
            catalog.require_product("missing")

    def test_by_category(self, catalog):
        names = [p.name for p in catalog.products_by_category(ProductCategory.CLOTHING)]
        assert names == ["Cloud Jacket", "Performance Shorts"]


class TestSearch:
    def test_empty_query_returns_everything(self, catalog):
        assert catalog.search_products("") == catalog.products

    def test_case_insensitive_name_match(self, catalog):
        assert [p.id for p in catalog.search_products("running SHOE")] == ["prod-a"]

    def test_description_match(self, catalog):
        assert [p.id for p in catalog.search_products("WEATHER")] == ["prod-b"]

    def test_no_match(self, catalog):
        assert catalog.search_products("kayak") == []

    def test_query_within_category(self, catalog):
        assert [p.id for p in catalog.search_products("running", ProductCategory.CLOTHING)] == ["prod-b"]
        assert [p.id for p in catalog.search_products("", ProductCategory.SHOES)] == ["prod-a"]
