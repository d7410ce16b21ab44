"""
Tests for the anonymous client-held cart.
"""
from decimal import Decimal
from types import SimpleNamespace

import pytest

from attire.core.exceptions import IntegrityError, NotFound
from attire.services.local_cart import LocalCart

PRODUCTS = {
    1: SimpleNamespace(price=500),
    2: SimpleNamespace(price=1299),
}


def test_adding_same_product_merges_lines():
    cart = LocalCart()

    first = cart.add(1, 1)
    second = cart.add(1, 2, size="L")

    assert first is second
    assert len(cart.lines) == 1
    assert cart.lines[0].quantity == 3


def test_line_ids_are_negative_and_unique():
    cart = LocalCart()

    a = cart.add(1)
    b = cart.add(2)

    assert a.id < 0 and b.id < 0
    assert a.id != b.id


def test_default_quantity_is_one():
    cart = LocalCart()
    assert cart.add(2).quantity == 1


def test_update_and_remove():
    cart = LocalCart()
    line = cart.add(1, 1)

    cart.update_quantity(line.id, 4)
    assert cart.item_count() == 4

    cart.remove(line.id)
    cart.remove(line.id)
    assert cart.lines == []


def test_update_unknown_line_raises_not_found():
    with pytest.raises(NotFound):
        LocalCart().update_quantity(-99, 2)


def test_totals_match_server_rules():
    cart = LocalCart()
    cart.add(1, 3)
    cart.add(2, 1)

    assert cart.subtotal(PRODUCTS) == Decimal("2799")
    assert cart.item_count() == 4


def test_subtotal_with_unknown_product_raises():
    cart = LocalCart()
    cart.add(3, 1)

    with pytest.raises(IntegrityError):
        cart.subtotal(PRODUCTS)


def test_merge_payload_uses_wire_names():
    cart = LocalCart()
    cart.add(2, 2, size="32", color="indigo")

    assert cart.to_merge_payload() == [
        {"productId": 2, "quantity": 2, "size": "32", "color": "indigo"}
    ]
