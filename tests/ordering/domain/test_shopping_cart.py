"""Tests for the ShoppingCart aggregate."""

import pytest
from ordering.cart.cart import ShoppingCart
from ordering.cart.events import CartCleared, CartItemAdded, CartItemRemoved, CartQuantityUpdated
from protean.exceptions import ValidationError


def _make_cart():
    return ShoppingCart.create(customer_id="cust-001")


def _add(cart, product_id="prod-001", price="₹199.00", quantity=1):
    return cart.add_item(product_id=product_id, name=f"Product {product_id}", price=price, quantity=quantity)


class TestAddItem:
    def test_new_product_adds_line(self):
        cart = _make_cart()
        _add(cart, quantity=2)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 2

    def test_same_product_merges_into_existing_line(self):
        cart = _make_cart()
        first_id = _add(cart, quantity=1)
        second_id = _add(cart, quantity=2)
        assert first_id == second_id
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 3

    def test_merge_is_one_line_per_product(self):
        cart = _make_cart()
        _add(cart, "prod-001")
        _add(cart, "prod-002")
        _add(cart, "prod-001")
        assert len(cart.items) == 2
        assert cart.find_product("prod-001").quantity == 2

    def test_quantity_must_be_positive(self):
        cart = _make_cart()
        with pytest.raises(ValidationError):
            _add(cart, quantity=0)

    def test_add_raises_event(self):
        cart = _make_cart()
        _add(cart, quantity=1)
        _add(cart, quantity=2)
        events = [e for e in cart._events if isinstance(e, CartItemAdded)]
        assert len(events) == 2
        assert events[1].quantity == 2
        assert events[1].line_quantity == 3


class TestUpdateQuantity:
    def test_overwrites_quantity(self):
        cart = _make_cart()
        item_id = _add(cart)
        cart.update_item_quantity(item_id, 5)
        assert cart.find_item(item_id).quantity == 5

    def test_update_raises_event(self):
        cart = _make_cart()
        item_id = _add(cart)
        cart.update_item_quantity(item_id, 4)
        events = [e for e in cart._events if isinstance(e, CartQuantityUpdated)]
        assert events[0].previous_quantity == 1
        assert events[0].new_quantity == 4

    @pytest.mark.parametrize("quantity", [0, -5])
    def test_zero_or_negative_removes_line(self, quantity):
        cart = _make_cart()
        item_id = _add(cart)
        cart.update_item_quantity(item_id, quantity)
        assert cart.find_item(item_id) is None
        assert len(cart.items) == 0

    def test_unknown_item_fails(self):
        cart = _make_cart()
        with pytest.raises(ValidationError):
            cart.update_item_quantity("missing", 2)


class TestRemoveAndClear:
    def test_remove_item(self):
        cart = _make_cart()
        item_id = _add(cart)
        _add(cart, "prod-002")
        cart.remove_item(item_id)
        assert len(cart.items) == 1
        removed = [e for e in cart._events if isinstance(e, CartItemRemoved)]
        assert removed[0].product_id == "prod-001"

    def test_remove_missing_item_leaves_cart_unchanged(self):
        cart = _make_cart()
        _add(cart)
        with pytest.raises(ValidationError):
            cart.remove_item("missing")
        assert len(cart.items) == 1

    def test_clear(self):
        cart = _make_cart()
        _add(cart, "prod-001")
        _add(cart, "prod-002")
        assert cart.clear() == 2
        assert len(cart.items) == 0
        cleared = [e for e in cart._events if isinstance(e, CartCleared)]
        assert cleared[0].items_removed == 2


class TestTotals:
    def test_subtotal_and_count(self):
        cart = _make_cart()
        _add(cart, "prod-001", price="₹199.00", quantity=2)
        _add(cart, "prod-002", price="₹1,050.50", quantity=1)
        assert cart.subtotal() == pytest.approx(1448.50)
        assert cart.item_count() == 3
