import pytest

from BakeryOPS.domain import (
    Ingredient,
    Order,
    OrderItem,
    OrderStatus,
    Product,
    ProductComponent,
    Recipe,
    RecipeIngredient,
    Unit,
)
from BakeryOPS.data.defaults import default_app_data


@pytest.fixture
def flour():
    # 10 ₪ / kg
    return Ingredient(
        id="A", name="Flour", price_per_unit=10.0, package_price=10.0,
        package_quantity=1.0, unit=Unit.KG,
    )


@pytest.fixture
def milk():
    # 8 ₪ / l
    return Ingredient(
        id="M", name="Milk", price_per_unit=8.0, package_price=8.0,
        package_quantity=1.0, unit=Unit.L,
    )


@pytest.fixture
def ingredients(flour, milk):
    return [flour, milk]


@pytest.fixture
def bread(flour):
    # 3 kg de farine -> 30 ₪, rendement 3 -> 10 ₪ / unité
    return Recipe(
        id="R1",
        name="Bread",
        ingredients=[RecipeIngredient(ingredient_id=flour.id, quantity=3000, unit=Unit.G)],
        yield_units=3,
        yield_unit="loaves",
        labor_minutes=30,
    )


@pytest.fixture
def bundle(bread):
    return Product(
        id="P1",
        name="Bread basket",
        components=[ProductComponent(recipe_id=bread.id, quantity=2)],
        profit_percent=50,
        selling_price=35,
    )


def make_order(amount, status=OrderStatus.PENDING, customer="Noa", date="2026-10-01", items=None):
    items = items if items is not None else [
        OrderItem(product_id="P1", quantity=1, price_per_unit=amount, total_price=amount)
    ]
    return Order(
        date=date, customer_name=customer, items=items, total_amount=amount, status=status
    )


@pytest.fixture
def app_data(ingredients, bread, bundle):
    return default_app_data().model_copy(
        update={"ingredients": ingredients, "recipes": [bread], "products": [bundle]}
    )
