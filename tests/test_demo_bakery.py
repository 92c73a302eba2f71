from BakeryOPS.core.reports import build_report
from BakeryOPS.data import get_DEMO_BAKERY
from BakeryOPS.domain import Recipe
from BakeryOPS.rules.pricing import product_pricing
from BakeryOPS.ui.results_view import format_to_shekel, render_report


def test_demo_bakery_is_consistent():
    data = get_DEMO_BAKERY()
    assert len(data.products) == 2
    for product in data.products:
        pricing = product_pricing(product, data.recipes, data.ingredients)
        assert not pricing.is_stale
        assert pricing.effective_price == product.selling_price
        assert pricing.effective_price >= pricing.live_ingredients_cost
    for order in data.orders:
        assert order.total_amount == (
            sum(i.total_price for i in order.items)
            + order.packaging_cost + order.delivery_cost - order.discount
        )


def test_demo_report_excludes_cancelled_order():
    data = get_DEMO_BAKERY()
    report = build_report(data.orders, data.products)
    assert report.total_orders == 3
    assert "Yossi" not in {c.name for c in report.top_customers}
    assert "CA total" in render_report(report)


def test_recipe_reads_document_keys():
    recipe = Recipe.model_validate(
        {"id": "r", "name": "Babka", "category": "bread", "ingredients": [],
         "yield": 2, "yieldUnit": "loaves", "laborMinutes": 90,
         "createdAt": 1, "updatedAt": 2}
    )
    assert recipe.yield_units == 2 and recipe.labor_minutes == 90
    assert recipe.to_document()["yieldUnit"] == "loaves"


def test_format_to_shekel():
    assert format_to_shekel(1234.5) == "₪1,234.50"
