"""Tests for the client-side cart store."""

import json

import pytest
from storefront.cart.cart import CartItem, CartStore
from storefront.cart.storage import MemoryCartStorage


def _item(product_id="prod-a", price=10.0, name=None, **extra):
    return CartItem(product_id=product_id, name=name or f"Product {product_id}", price=price, **extra)


@pytest.fixture()
def storage():
    return MemoryCartStorage()


@pytest.fixture()
def cart(storage):
    return CartStore(storage)


class TestAddToCart:
    def test_new_line(self, cart):
        cart.add_to_cart(_item("a"), quantity=2)
        assert cart.get_cart_item_quantity("a") == 2
        assert len(cart) == 1

    def test_default_quantity_is_one(self, cart):
        cart.add_to_cart(_item("a"))
        assert cart.get_cart_item_quantity("a") == 1

    def test_existing_line_is_incremented(self, cart):
        cart.add_to_cart(_item("a"), quantity=2)
        cart.add_to_cart(_item("a"), quantity=3)

        assert len(cart) == 1
        assert cart.get_cart_item_quantity("a") == 5

    def test_insertion_order_kept(self, cart):
        cart.add_to_cart(_item("b"))
        cart.add_to_cart(_item("a"))
        cart.add_to_cart(_item("b"))
        assert [i.product_id for i in cart.items] == ["b", "a"]

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity_rejected(self, cart, quantity):
        with pytest.raises(ValueError):
            cart.add_to_cart(_item("a"), quantity=quantity)
        assert len(cart) == 0


class TestRemoveAndUpdate:
    def test_remove(self, cart):
        cart.add_to_cart(_item("a"))
        cart.add_to_cart(_item("b"))
        cart.remove_from_cart("a")
        assert not cart.is_in_cart("a")
        assert cart.is_in_cart("b")

    def test_remove_absent_is_no_op(self, cart):
        cart.add_to_cart(_item("a"))
        cart.remove_from_cart("zzz")
        assert len(cart) == 1

    def test_update_sets_exact_quantity(self, cart):
        cart.add_to_cart(_item("a"), quantity=5)
        cart.update_quantity("a", 2)
        assert cart.get_cart_item_quantity("a") == 2

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_update_to_zero_or_less_removes(self, cart, quantity):
        cart.add_to_cart(_item("a"), quantity=5)
        cart.update_quantity("a", quantity)
        assert not cart.is_in_cart("a")

    def test_update_to_zero_matches_remove(self):
        removed = CartStore(MemoryCartStorage())
        updated = CartStore(MemoryCartStorage())
        for cart in (removed, updated):
            cart.add_to_cart(_item("a"), quantity=2)
            cart.add_to_cart(_item("b"))

        removed.remove_from_cart("a")
        updated.update_quantity("a", 0)

        assert removed.items == updated.items

    def test_update_absent_is_no_op(self, cart):
        cart.update_quantity("a", 3)
        assert len(cart) == 0

    def test_clear(self, cart):
        cart.add_to_cart(_item("a"))
        cart.add_to_cart(_item("b"))
        cart.clear_cart()
        assert cart.items == ()
        assert cart.get_total_items() == 0


class TestTotals:
    def test_totals(self, cart):
        cart.add_to_cart(_item("a", price=10.0), quantity=2)
        cart.add_to_cart(_item("b", price=5.0), quantity=1)

        assert cart.get_total_items() == 3
        assert cart.get_total_price() == pytest.approx(25.0)

    def test_empty_cart_totals(self, cart):
        assert cart.get_total_items() == 0
        assert cart.get_total_price() == 0
        assert cart.get_cart_item_quantity("a") == 0


class TestPersistence:
    def test_every_mutation_is_saved(self, cart, storage):
        cart.add_to_cart(_item("a", price=10.0, image_url="https://images.example.com/a.jpg"), quantity=2)

        saved = json.loads(storage.payload)
        assert saved == [
            {
                "productId": "a",
                "name": "Product a",
                "price": 10.0,
                "imageUrl": "https://images.example.com/a.jpg",
                "quantity": 2,
            }
        ]

        cart.clear_cart()
        assert json.loads(storage.payload) == []

    def test_hydrates_from_storage(self, storage):
        CartStore(storage).add_to_cart(_item("a"), quantity=3)

        restored = CartStore(storage)

        assert restored.get_cart_item_quantity("a") == 3

    def test_corrupt_snapshot_yields_empty_cart(self):
        cart = CartStore(MemoryCartStorage("{not json"))
        assert cart.items == ()

    def test_invalid_lines_yield_empty_cart(self):
        payload = json.dumps([{"productId": "a", "name": "A", "price": 1.0, "quantity": 0}])
        assert CartStore(MemoryCartStorage(payload)).items == ()

    def test_duplicate_lines_are_merged_on_load(self):
        payload = json.dumps(
            [
                {"productId": "a", "name": "A", "price": 1.0, "quantity": 1},
                {"productId": "a", "name": "A", "price": 1.0, "quantity": 2},
            ]
        )
        cart = CartStore(MemoryCartStorage(payload))
        assert len(cart) == 1
        assert cart.get_cart_item_quantity("a") == 3

    def test_failed_save_keeps_cart_in_memory(self):
        class BrokenStorage(MemoryCartStorage):
            def save(self, payload):
                raise OSError("disk full")

        cart = CartStore(BrokenStorage())
        cart.add_to_cart(_item("a"), quantity=2)

        assert cart.get_cart_item_quantity("a") == 2

    def test_failed_load_yields_empty_cart(self):
        class UnreadableStorage(MemoryCartStorage):
            def load(self):
                raise OSError("permission denied")

        assert CartStore(UnreadableStorage()).items == ()


class TestCartItem:
    def test_accepts_camel_case(self):
        item = CartItem.model_validate({"productId": "a", "name": "A", "price": 2.5, "imageUrl": None})
        assert item.product_id == "a"
        assert item.quantity == 1

    def test_negative_price_rejected(self):
        with pytest.raises(ValueError):
            _item(price=-1.0)
