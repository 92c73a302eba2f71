import math

import pytest

from BakeryOPS.domain import Packaging, PricingSettings, Product, ProductComponent
from BakeryOPS.rules.pricing import (
    break_even_units,
    full_cost_pricing,
    price_quote,
    product_pricing,
    quote_recipe_batch,
    realized_profit_percent,
    round_to_nice_price,
    suggest_bundle_price,
    suggest_price,
)


@pytest.mark.parametrize(
    "price, expected",
    [(17, 17), (17.2, 18), (19.99, 20), (20, 20), (23, 25), (49.5, 50),
     (50, 50), (61, 70), (99.1, 100), (100, 100), (101, 125), (260, 275)],
)
def test_round_to_nice_price_tiers(price, expected):
    assert round_to_nice_price(price) == expected


def test_nice_price_never_rounds_down():
    for cents in range(1, 30000, 37):
        price = cents / 100
        assert round_to_nice_price(price) >= price


def test_suggest_price_is_unrounded():
    assert suggest_price(10.0, 25) == 12.5


def test_bundle_price_rounds_up_to_whole_unit():
    assert suggest_bundle_price(10.1, 50) == 16.0


def test_bundle_price_defaults_to_hundred_percent():
    assert suggest_bundle_price(10.0, None) == 20.0
    assert suggest_bundle_price(10.0, 0) == 20.0


def test_realized_profit_guards_zero_cost():
    assert realized_profit_percent(50.0, 0.0) == 0
    assert realized_profit_percent(150.0, 100.0) == 50.0


def test_break_even_units():
    assert break_even_units(10.0, 5.0) == 100
    assert break_even_units(10.0, 7.0) == 167
    assert break_even_units(5.0, 6.0) == 0
    assert break_even_units(10.0, 5.0, fixed_costs=12) == 3


def test_price_quote_uses_calculated_price_without_override():
    q = price_quote(total_cost=40.0, quantity=4, profit_percent=50)
    assert q.calculated_price == 60.0
    assert q.actual_price == 60.0
    assert q.rounded_price == 60
    assert q.profit == 20.0
    assert q.actual_profit_percent == 50.0
    assert q.cost_per_unit == 10.0
    assert q.price_per_unit == 15.0
    assert q.break_even_units == 100
    assert q.shows_break_even


def test_price_quote_manual_override():
    q = price_quote(total_cost=40.0, quantity=4, profit_percent=50, custom_price=100.0)
    assert q.calculated_price == 60.0
    assert q.actual_price == 100.0
    assert q.profit == 60.0
    assert q.actual_profit_percent == 150.0
    assert q.profit_per_unit == 15.0
    assert q.rounded_profit == 20.0


def test_price_quote_zero_override_is_kept():
    q = price_quote(total_cost=40.0, quantity=1, profit_percent=50, custom_price=0.0)
    assert q.actual_price == 0.0
    assert q.profit == -40.0
    assert q.break_even_units == 0
    assert not q.shows_break_even


def test_break_even_outside_display_range_stays_exact():
    q = price_quote(total_cost=100.0, quantity=100, profit_percent=0.1)
    assert q.break_even_units > 999
    assert not q.shows_break_even


def test_zero_cost_quote():
    q = price_quote(total_cost=0.0, quantity=2, profit_percent=100)
    assert q.calculated_price == 0.0
    assert q.actual_profit_percent == 0


def test_zero_quantity_propagates_non_finite():
    q = price_quote(total_cost=10.0, quantity=0, profit_percent=100)
    assert math.isinf(q.cost_per_unit)
    assert q.break_even_units == 0


def test_quote_recipe_batch_adds_packaging_and_delivery(bread, ingredients):
    box = Packaging(id="1", name="Box", cost=5)
    settings = PricingSettings(delivery_cost=30)
    q = quote_recipe_batch(
        bread, ingredients, quantity=2, profit_percent=100,
        packaging=box, include_delivery=True, settings=settings,
    )
    assert q.ingredients_cost == 20.0
    assert q.packaging_cost == 10
    assert q.delivery_cost == 30
    assert q.total_cost == 60.0
    assert q.cost_per_unit == 30.0
    assert q.calculated_price == 120.0
    assert q.rounded_price == 125


def test_quote_recipe_batch_defaults(bread, ingredients):
    q = quote_recipe_batch(bread, ingredients, quantity=1, profit_percent=50)
    assert q.packaging_cost == 0 and q.delivery_cost == 0
    assert q.total_cost == 10.0
    assert q.calculated_price == 15.0


def test_product_pricing_live_vs_snapshot(bundle, bread, ingredients):
    pricing = product_pricing(bundle, [bread], ingredients)
    assert pricing.live_ingredients_cost == 20.0
    assert pricing.cached_ingredients_cost is None
    assert pricing.is_stale
    assert pricing.suggested_price == 30.0
    assert pricing.effective_price == 35
    assert pricing.realized_profit_percent == 75.0

    saved = bundle.model_copy(update={"ingredients_cost": 20.0})
    assert not product_pricing(saved, [bread], ingredients).is_stale


def test_product_pricing_without_selling_price_uses_suggestion(bread, ingredients):
    product = Product(name="New", components=[ProductComponent(recipe_id=bread.id, quantity=1)])
    pricing = product_pricing(product, [bread], ingredients)
    assert pricing.effective_price == pricing.suggested_price == 20.0


def test_full_cost_pricing(bread, ingredients):
    settings = PricingSettings(
        labor_cost_per_hour=60, profit_margin_percent=50, overhead_percent=10
    )
    box = Packaging(name="Box", cost=5)
    r = full_cost_pricing(bread, ingredients, settings, packaging=box)
    assert r.ingredients_cost == 30.0
    assert r.labor_cost == 30.0
    assert r.overhead_cost == 3.0
    assert r.total_cost == 68.0
    assert r.suggested_price == 102.0
    assert r.gross_profit == 67.0
    assert r.net_profit == 34.0
    assert r.net_profit_percent == pytest.approx(100 / 3)


def test_full_cost_pricing_zero_price_guard(ingredients):
    from BakeryOPS.domain import Recipe

    empty = Recipe(name="Nothing")
    r = full_cost_pricing(empty, ingredients, PricingSettings())
    assert r.suggested_price == 0.0
    assert r.gross_profit_percent == 0.0 and r.net_profit_percent == 0.0
