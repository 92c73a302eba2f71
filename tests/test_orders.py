import pytest
from pydantic import ValidationError

from BakeryOPS.core.orders import (
    catalog_item,
    custom_item,
    item_label,
    new_order,
    order_total,
    revise_order,
    set_status,
)
from BakeryOPS.domain import OrderItem, OrderStatus


def _items_worth_100():
    return [
        OrderItem(product_id="P1", quantity=2, price_per_unit=30, total_price=60),
        OrderItem(product_id="P2", quantity=1, price_per_unit=40, total_price=40),
    ]


def test_order_total():
    assert order_total(_items_worth_100(), 5, 10, 20) == 95


def test_order_total_can_be_negative():
    assert order_total(_items_worth_100(), 5, 10, 200) == -85


def test_order_total_empty():
    assert order_total([]) == 0


def test_catalog_item_snapshots_price(bundle):
    item = catalog_item(bundle, 3)
    assert item.price_per_unit == 35
    assert item.total_price == 105

    repriced = bundle.model_copy(update={"selling_price": 50})
    assert catalog_item(repriced, 1).price_per_unit == 50
    assert item.price_per_unit == 35


def test_custom_item_requires_name():
    item = custom_item("Wedding cake", 400, 1)
    assert item.is_custom and item.total_price == 400
    with pytest.raises(ValidationError):
        custom_item("", 400, 1)


def test_custom_name_only_on_custom_items():
    with pytest.raises(ValidationError):
        OrderItem(product_id="P1", custom_name="x", quantity=1, price_per_unit=1, total_price=1)


def test_quantity_must_be_positive():
    with pytest.raises(ValidationError):
        custom_item("Tart", 10, 0)


def test_item_label(bundle):
    assert item_label(catalog_item(bundle, 1), [bundle]) == "Bread basket"
    assert item_label(custom_item("Tart", 10, 1), [bundle]) == "Tart"
    assert item_label(catalog_item(bundle, 1), []) == "unknown"


def test_new_order_computes_total(bundle):
    order = new_order("2026-10-01", "Noa", [catalog_item(bundle, 2)], 5, 10, 20)
    assert order.total_amount == 65
    assert order.status == OrderStatus.PENDING
    assert order.month == "2026-10"


def test_revise_order_keeps_line_prices(bundle):
    order = new_order("2026-10-01", "Noa", [catalog_item(bundle, 1)])
    revised = revise_order(order, discount=5, items=order.items + [custom_item("Tart", 10, 2)])
    assert revised.items[0].price_per_unit == 35
    assert revised.total_amount == 35 + 20 - 5
    assert revised.id == order.id
    assert revised.updated_at >= order.updated_at


def test_any_status_transition_is_allowed(bundle):
    order = new_order("2026-10-01", "Noa", [catalog_item(bundle, 1)], status=OrderStatus.DELIVERED)
    back = set_status(order, OrderStatus.PENDING)
    assert back.status == OrderStatus.PENDING
    assert set_status(back, "cancelled").status == OrderStatus.CANCELLED
    assert order.status == OrderStatus.DELIVERED
