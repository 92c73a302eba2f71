"""
Coûts matières : ingrédient -> recette -> coffret.

Règles de tolérance conservées telles quelles :
- une référence absente (ingrédient ou recette supprimé) compte pour 0 ;
- un diviseur nul (contenance, rendement) donne une valeur non finie.
"""

from typing import List, Optional, Sequence

from pydantic import BaseModel

from BakeryOPS.domain.ingredients import Ingredient
from BakeryOPS.domain.product import Product
from BakeryOPS.domain.recipe import Recipe, RecipeIngredient
from BakeryOPS.domain.types import Unit
from BakeryOPS.rules.units import convert, is_convertible
from BakeryOPS.utils import find_by_id, ieee_div


def price_per_unit(package_price: float, package_quantity: float) -> float:
    """Prix par unité de mesure d'un ingrédient acheté en paquet.

    Formule
    -------
    price_per_unit = package_price / package_quantity

    Pas de validation ici : une contenance nulle donne `inf` (ou `nan`).

    Exemple
    -------
    >>> price_per_unit(12.0, 2.0)
    6.0
    >>> price_per_unit(12.0, 0)
    inf
    """
    return ieee_div(package_price, package_quantity)


def ingredient_line_cost(line: RecipeIngredient, ingredients: Sequence[Ingredient]) -> float:
    """Coût d'une ligne de recette, converti dans l'unité de l'ingrédient.

    Formule
    -------
    cost = convert(line.quantity, line.unit, ingredient.unit) x ingredient.price_per_unit

    Ingrédient introuvable -> 0.
    """
    ingredient = find_by_id(ingredients, line.ingredient_id)
    if ingredient is None:
        return 0.0
    qty = convert(line.quantity, line.unit, ingredient.unit)
    return qty * ingredient.price_per_unit


def recipe_total_cost(recipe: Recipe, ingredients: Sequence[Ingredient]) -> float:
    """Coût total matières d'une exécution de la recette."""
    return sum(
        (ingredient_line_cost(line, ingredients) for line in recipe.ingredients), 0.0
    )


def recipe_cost_per_yield_unit(recipe: Recipe, ingredients: Sequence[Ingredient]) -> float:
    """Coût matières par unité de rendement (rendement nul -> non fini)."""
    return ieee_div(recipe_total_cost(recipe, ingredients), recipe.yield_units)


def product_ingredients_cost(
    product: Product, recipes: Sequence[Recipe], ingredients: Sequence[Ingredient]
) -> float:
    """Coût matières d'un coffret.

    Formule
    -------
    cost = Σ recipe_cost_per_yield_unit(recipe) x component.quantity

    Recette introuvable -> le composant compte pour 0.
    """
    total = 0.0
    for component in product.components:
        recipe = find_by_id(recipes, component.recipe_id)
        if recipe is None:
            continue
        total += recipe_cost_per_yield_unit(recipe, ingredients) * component.quantity
    return total


# --------- Détail par ligne ---------


class LineCost(BaseModel):
    """Ligne du tableau de coûts d'une recette."""

    ingredient_id: str
    ingredient_name: Optional[str]
    quantity: float
    unit: Unit
    converted_quantity: float
    cost: float
    missing: bool = False  # ingrédient supprimé du catalogue
    approximated: bool = False  # conversion non prévue, quantité reprise telle quelle


def recipe_cost_breakdown(recipe: Recipe, ingredients: Sequence[Ingredient]) -> List[LineCost]:
    rows: List[LineCost] = []
    for line in recipe.ingredients:
        ingredient = find_by_id(ingredients, line.ingredient_id)
        if ingredient is None:
            rows.append(
                LineCost(
                    ingredient_id=line.ingredient_id,
                    ingredient_name=None,
                    quantity=line.quantity,
                    unit=line.unit,
                    converted_quantity=line.quantity,
                    cost=0.0,
                    missing=True,
                )
            )
            continue
        rows.append(
            LineCost(
                ingredient_id=line.ingredient_id,
                ingredient_name=ingredient.name,
                quantity=line.quantity,
                unit=line.unit,
                converted_quantity=convert(line.quantity, line.unit, ingredient.unit),
                cost=ingredient_line_cost(line, ingredients),
                approximated=not is_convertible(line.unit, ingredient.unit),
            )
        )
    return rows
