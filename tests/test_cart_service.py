"""Tests for the in-memory cart."""

import random
from collections import Counter
from decimal import Decimal

from storefront.core.events import EventBus
from storefront.schemas.product import Product
from storefront.services.cart_service import CartService


class TestAddAndRemove:
    def test_add_creates_line_with_quantity_one(self, product_a):
        cart = CartService()
        cart.add_to_cart(product_a)

        assert cart.quantity_for(product_a) == 1
        assert cart.unique_item_count == 1

    def test_add_existing_increments(self, product_a):
        cart = CartService()
        cart.add_to_cart(product_a)
        cart.add_to_cart(product_a)

        assert cart.quantity_for(product_a) == 2
        assert cart.unique_item_count == 1

    def test_add_accepts_out_of_stock(self, out_of_stock_product):
        cart = CartService()
        cart.add_to_cart(out_of_stock_product)
        assert cart.is_in_cart(out_of_stock_product)

    def test_remove_decrements(self, product_a):
        cart = CartService()
        cart.add_to_cart(product_a)
        cart.add_to_cart(product_a)
        cart.remove_from_cart(product_a)

        assert cart.quantity_for(product_a) == 1

    def test_remove_last_unit_removes_line(self, product_a):
        cart = CartService()
        cart.add_to_cart(product_a)
        cart.remove_from_cart(product_a)

        assert not cart.is_in_cart(product_a)
        assert cart.items == []

    def test_remove_absent_is_noop(self, product_a, product_b):
        cart = CartService()
        cart.add_to_cart(product_a)
        cart.remove_from_cart(product_b)

        assert cart.item_count == 1

    def test_remove_all_instances(self, product_a, product_b):
        cart = CartService()
        for _ in range(3):
            cart.add_to_cart(product_a)
        cart.add_to_cart(product_b)

        cart.remove_all_instances(product_a)
        cart.remove_all_instances(product_a)

        assert cart.quantity_for(product_a) == 0
        assert cart.item_count == 1

    def test_identity_is_product_id(self, product_a):
        cart = CartService()
        cart.add_to_cart(product_a)
        cart.add_to_cart(product_a.model_copy(update={"name": "Renamed"}))

        assert cart.unique_item_count == 1
        assert cart.quantity_for(product_a) == 2


class TestUpdateQuantity:
    def test_sets_existing_line(self, product_a):
        cart = CartService()
        cart.add_to_cart(product_a)
        cart.update_quantity(product_a, 5)

        assert cart.quantity_for(product_a) == 5

    def test_creates_missing_line(self, product_a):
        cart = CartService()
        cart.update_quantity(product_a, 3)

        assert cart.quantity_for(product_a) == 3

    def test_zero_removes(self, product_a):
        cart = CartService()
        cart.add_to_cart(product_a)
        assert cart.update_quantity(product_a, 0) is None
        assert not cart.is_in_cart(product_a)

    def test_negative_removes(self, product_a):
        cart = CartService()
        cart.update_quantity(product_a, 2)
        cart.update_quantity(product_a, -4)

        assert cart.is_empty


class TestTotals:
    def test_example_cart(self, product_a, product_b):
        cart = CartService()
        cart.add_to_cart(product_a)
        cart.add_to_cart(product_a)
        cart.add_to_cart(product_b)

        assert cart.total == Decimal("45.00")
        assert cart.item_count == 3
        assert cart.unique_item_count == 2

    def test_empty_cart(self):
        cart = CartService()
        assert cart.total == Decimal("0")
        assert cart.item_count == 0
        assert cart.unique_item_count == 0

    def test_cart_totals_summary(self, product_a, product_b):
        cart = CartService()
        cart.update_quantity(product_a, 2)
        cart.add_to_cart(product_b)

        totals = cart.get_cart_totals()
        assert totals.total == Decimal("45.00")
        assert totals.formatted_total == "$45.00"
        assert [line.product.id for line in totals.items] == ["prod-a", "prod-b"]
        assert totals.items[0].total_price == Decimal("20.00")

    def test_insertion_order_preserved(self, product_a, product_b):
        cart = CartService()
        cart.add_to_cart(product_b)
        cart.add_to_cart(product_a)
        cart.add_to_cart(product_b)

        assert [line.product.id for line in cart.items] == ["prod-b", "prod-a"]

    def test_clear(self, product_a, product_b):
        cart = CartService()
        cart.add_to_cart(product_a)
        cart.add_to_cart(product_b)
        cart.clear_cart()

        assert cart.is_empty
        assert cart.total == Decimal("0")

    def test_items_are_copies(self, product_a):
        cart = CartService()
        cart.add_to_cart(product_a)
        cart.items[0].quantity = 50

        assert cart.quantity_for(product_a) == 1


class TestSequences:
    def test_counts_match_net_adds(self):
        products = [
            Product(id=f"p{i}", name=f"Product {i}", price=Decimal(i + 1))
            for i in range(5)
        ]
        rng = random.Random(1234)

        for _ in range(20):
            cart = CartService()
            net = Counter()
            for _ in range(60):
                product = rng.choice(products)
                if rng.random() < 0.6:
                    cart.add_to_cart(product)
                    net[product.id] += 1
                else:
                    cart.remove_from_cart(product)
                    if net[product.id] > 0:
                        net[product.id] -= 1

            assert cart.item_count == sum(net.values())
            assert cart.unique_item_count == sum(1 for count in net.values() if count > 0)
            assert all(line.quantity >= 1 for line in cart.items)

    def test_remove_is_left_inverse_of_add(self, product_a):
        cart = CartService()
        cart.update_quantity(product_a, 4)
        cart.add_to_cart(product_a)
        cart.remove_from_cart(product_a)

        assert cart.quantity_for(product_a) == 4


class TestEvents:
    def test_changes_are_published(self, product_a):
        events = EventBus()
        received = []
        events.subscribe("cart.updated", lambda name, payload: received.append(payload))

        cart = CartService(events=events)
        cart.add_to_cart(product_a)
        cart.remove_from_cart(product_a)
        cart.remove_from_cart(product_a)

        assert [p["item_count"] for p in received] == [1, 0]
