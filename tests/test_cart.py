import random

import pytest
from pydantic import ValidationError
from app.cart import CartItem, CartStore, CartRegistry


def _item(product_id=1, supplier_id=10, price=10.0, min_quantity=1, name=None):
    return CartItem(
        product_id=product_id,
        product_name=name or f"Product {product_id}",
        supplier_id=supplier_id,
        supplier_name=f"Supplier {supplier_id}",
        price=price,
        unit="kg",
        min_quantity=min_quantity,
    )


def test_add_defaults_to_minimum_quantity():
    cart = CartStore()
    line = cart.add(_item(min_quantity=5))
    assert line.quantity == 5
    assert cart.item_count() == 5


def test_add_below_minimum_is_raised_to_minimum():
    cart = CartStore()
    cart.add(_item(min_quantity=5), 2)
    assert cart.get(1).quantity == 5


def test_add_same_product_merges_quantities():
    cart = CartStore()
    cart.add(_item(), 2)
    cart.add(_item(), 3)
    assert len(cart) == 1
    assert cart.get(1).quantity == 5


def test_add_does_not_mutate_caller_item():
    cart = CartStore()
    item = _item(min_quantity=2)
    cart.add(item, 4)
    assert item.quantity == 0


def test_update_quantity_clamps_up_to_minimum():
    cart = CartStore()
    cart.add(_item(min_quantity=3), 6)
    cart.update_quantity(1, 1)
    assert cart.get(1).quantity == 3


@pytest.mark.parametrize("quantity", [0, -4])
def test_update_quantity_at_or_below_zero_removes_line(quantity):
    cart = CartStore()
    cart.add(_item())
    assert cart.update_quantity(1, quantity) is None
    assert cart.is_empty


def test_update_unknown_product_is_noop():
    cart = CartStore()
    cart.add(_item())
    assert cart.update_quantity(99, 4) is None
    assert [i.product_id for i in cart.items] == [1]


def test_remove_and_clear():
    cart = CartStore()
    cart.add(_item(1))
    cart.add(_item(2))
    cart.remove(1)
    assert [i.product_id for i in cart.items] == [2]
    cart.remove(42)
    assert len(cart) == 1
    cart.clear()
    assert cart.is_empty
    assert cart.total_price() == 0
    assert cart.item_count() == 0


def test_totals():
    cart = CartStore()
    cart.add(_item(1, price=25.0), 2)
    cart.add(_item(2, price=70.0), 1)
    assert cart.total_price() == 120.0
    assert cart.item_count() == 3


def test_groups_partition_by_supplier_in_first_seen_order():
    cart = CartStore()
    cart.add(_item(1, supplier_id=20, price=10.0), 2)
    cart.add(_item(2, supplier_id=10, price=5.0), 1)
    cart.add(_item(3, supplier_id=20, price=1.0), 3)
    groups = cart.groups()
    assert [g.supplier_id for g in groups] == [20, 10]
    assert [i.product_id for i in groups[0].items] == [1, 3]
    assert groups[0].total == 23.0
    assert groups[1].total == 5.0
    assert sum(g.total for g in groups) == cart.total_price()


def test_groups_of_empty_cart():
    assert CartStore().groups() == []


def test_to_dict_shape():
    cart = CartStore()
    cart.add(_item(1, price=12.5), 2)
    data = cart.to_dict()
    assert data["total_price"] == 25.0
    assert data["item_count"] == 2
    assert data["items"][0]["line_total"] == 25.0
    assert data["groups"][0]["supplier_id"] == 10


def test_item_rejects_negative_price_and_zero_minimum():
    with pytest.raises(ValidationError):
        _item(price=-1)
    with pytest.raises(ValidationError):
        _item(min_quantity=0)


def test_registry_keeps_one_cart_per_vendor():
    registry = CartRegistry()
    registry.for_vendor(1).add(_item())
    assert registry.for_vendor(1).item_count() == 1
    assert registry.for_vendor(2).is_empty
    registry.discard(1)
    assert registry.for_vendor(1).is_empty


def test_get_does_not_create_cart():
    registry = CartRegistry()
    assert registry.get(5) is None
    cart = registry.for_vendor(5)
    assert registry.get(5) is cart


@pytest.mark.parametrize("seed", range(5))
def test_random_operation_sequences_keep_cart_consistent(seed):
    rng = random.Random(seed)
    catalog = {pid: _item(pid, supplier_id=pid % 3, min_quantity=rng.randint(1, 6)) for pid in range(1, 8)}
    cart = CartStore()
    for _ in range(300):
        pid = rng.choice(list(catalog))
        op = rng.choice(("add", "update", "remove"))
        if op == "add":
            cart.add(catalog[pid], rng.choice([None, 0, rng.randint(1, 10)]))
        elif op == "update":
            cart.update_quantity(pid, rng.randint(-3, 12))
        else:
            cart.remove(pid)

        ids = [i.product_id for i in cart.items]
        assert len(ids) == len(set(ids))
        assert all(i.quantity >= i.min_quantity for i in cart.items)
        assert cart.item_count() == sum(i.quantity for i in cart.items)
