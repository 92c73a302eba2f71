"""
Jeu de données de démonstration : quelques ingrédients, deux recettes,
deux coffrets et un petit historique de commandes.
"""

from BakeryOPS.core.catalog import save_product
from BakeryOPS.core.orders import catalog_item, custom_item, new_order
from BakeryOPS.data.defaults import default_app_data
from BakeryOPS.domain import (
    Ingredient,
    OrderStatus,
    Product,
    ProductComponent,
    Recipe,
    RecipeCategory,
    RecipeIngredient,
    Unit,
)

# nom, prix paquet (₪), contenance, unité
DEMO_INGREDIENTS = {
    "flour": ("Farine", 6.0, 1, Unit.KG),
    "sugar": ("Sucre", 5.0, 1, Unit.KG),
    "butter": ("Beurre", 9.0, 200, Unit.G),
    "eggs": ("Oeufs (12)", 14.0, 12, Unit.UNIT),
    "cocoa": ("Cacao", 18.0, 250, Unit.G),
    "milk": ("Lait", 6.5, 1, Unit.L),
    "vanilla": ("Extrait de vanille", 12.0, 50, Unit.ML),
}


def _ingredients():
    return [
        Ingredient.from_package(name, price, qty, unit, id=key)
        for key, (name, price, qty, unit) in DEMO_INGREDIENTS.items()
    ]


def _recipes():
    cake = Recipe(
        id="choco-cake",
        name="Gâteau au chocolat",
        category=RecipeCategory.CAKE,
        ingredients=[
            RecipeIngredient(ingredient_id="flour", quantity=250, unit=Unit.G),
            RecipeIngredient(ingredient_id="sugar", quantity=200, unit=Unit.G),
            RecipeIngredient(ingredient_id="butter", quantity=150, unit=Unit.G),
            RecipeIngredient(ingredient_id="eggs", quantity=4, unit=Unit.UNIT),
            RecipeIngredient(ingredient_id="cocoa", quantity=60, unit=Unit.G),
            RecipeIngredient(ingredient_id="milk", quantity=1, unit=Unit.CUP),
        ],
        yield_units=12,
        yield_unit="parts",
        labor_minutes=45,
    )
    cookies = Recipe(
        id="vanilla-cookies",
        name="Sablés vanille",
        category=RecipeCategory.COOKIE,
        ingredients=[
            RecipeIngredient(ingredient_id="flour", quantity=0.3, unit=Unit.KG),
            RecipeIngredient(ingredient_id="sugar", quantity=100, unit=Unit.G),
            RecipeIngredient(ingredient_id="butter", quantity=200, unit=Unit.G),
            RecipeIngredient(ingredient_id="eggs", quantity=1, unit=Unit.UNIT),
            RecipeIngredient(ingredient_id="vanilla", quantity=2, unit=Unit.TSP),
        ],
        yield_units=30,
        yield_unit="sablés",
        labor_minutes=30,
    )
    return [cake, cookies]


def build_demo_bakery():
    data = default_app_data().model_copy(
        update={"ingredients": _ingredients(), "recipes": _recipes()}
    )
    data = save_product(
        data,
        Product(
            id="cookie-box",
            name="Boîte de 12 sablés",
            components=[ProductComponent(recipe_id="vanilla-cookies", quantity=12)],
            profit_percent=150,
        ),
    )
    data = save_product(
        data,
        Product(
            id="tea-box",
            name="Coffret goûter",
            components=[
                ProductComponent(recipe_id="choco-cake", quantity=4),
                ProductComponent(recipe_id="vanilla-cookies", quantity=6),
            ],
            profit_percent=200,
        ),
    )
    box, tea = data.products

    orders = [
        new_order("2026-09-04", "Noa", [catalog_item(box, 2)], packaging_cost=5,
                  status=OrderStatus.DELIVERED, customer_phone="050-1234567"),
        new_order("2026-09-18", "Dana", [catalog_item(tea, 1), custom_item("Gâteau d'anniversaire", 180, 1)],
                  delivery_cost=30, discount=10, status=OrderStatus.DELIVERED),
        new_order("2026-10-02", "Noa", [catalog_item(tea, 2)], status=OrderStatus.READY),
        new_order("2026-10-09", "Yossi", [catalog_item(box, 3)], status=OrderStatus.CANCELLED),
    ]
    return data.model_copy(update={"orders": orders})
