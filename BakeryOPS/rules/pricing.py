"""
Prix conseillés, prix "ronds", rentabilité et point mort.

Deux contextes de prix :
- calculateur interactif : prix calculé non arrondi + prix rond proposé ;
- coffret (Product) : prix conseillé arrondi à l'unité supérieure.
"""

import math
from typing import Optional, Sequence

import numpy as np
from pydantic import BaseModel

from BakeryOPS.data.defaults import (
    BREAK_EVEN_DISPLAY_RANGE,
    DEFAULT_BUNDLE_PROFIT_PERCENT,
    FIXED_COSTS_REFERENCE,
)
from BakeryOPS.domain.ingredients import Ingredient
from BakeryOPS.domain.product import Product
from BakeryOPS.domain.recipe import Recipe
from BakeryOPS.domain.settings import Packaging, PricingSettings
from BakeryOPS.rules.costing import (
    product_ingredients_cost,
    recipe_cost_per_yield_unit,
    recipe_total_cost,
)
from BakeryOPS.utils import ieee_div

# Paliers du prix rond : (prix max exclu, pas d'arrondi)
NICE_PRICE_STEPS = [
    (20, 1),
    (50, 5),
    (100, 10),
]
NICE_PRICE_TOP_STEP = 25


def suggest_price(total_cost: float, profit_percent: float) -> float:
    """Prix conseillé non arrondi.

    Formule
    -------
    price = total_cost x (1 + profit_percent / 100)

    Exemple
    -------
    >>> suggest_price(40.0, 50)
    60.0
    """
    return total_cost * (1 + profit_percent / 100)


def suggest_bundle_price(ingredients_cost: float, profit_percent: Optional[float] = None) -> float:
    """Prix conseillé d'un coffret, arrondi à l'unité supérieure.

    Une marge absente ou nulle retombe sur la marge par défaut du
    formulaire coffret (100 %).

    Exemple
    -------
    >>> suggest_bundle_price(12.3, 50)
    19.0
    >>> suggest_bundle_price(12.3)
    25.0
    """
    pct = profit_percent or DEFAULT_BUNDLE_PROFIT_PERCENT
    return float(np.ceil(suggest_price(ingredients_cost, pct)))


def round_to_nice_price(price: float) -> float:
    """Arrondit vers le haut à un prix "rond" selon des paliers.

    Paliers
    -------
    - price < 20  : unité supérieure
    - price < 50  : multiple de 5 supérieur
    - price < 100 : multiple de 10 supérieur
    - sinon       : multiple de 25 supérieur

    Exemple
    -------
    >>> round_to_nice_price(17)
    17.0
    >>> round_to_nice_price(23)
    25.0
    >>> round_to_nice_price(61)
    70.0
    >>> round_to_nice_price(101)
    125.0
    """
    step = NICE_PRICE_TOP_STEP
    for upper, candidate in NICE_PRICE_STEPS:
        if price < upper:
            step = candidate
            break
    return float(np.ceil(price / step) * step)


def realized_profit_percent(price: float, total_cost: float) -> float:
    """Marge réalisée en % du coût ; 0 si le coût est nul ou négatif."""
    if total_cost > 0:
        return (price - total_cost) / total_cost * 100
    return 0.0


def break_even_units(
    price_per_unit: float,
    cost_per_unit: float,
    fixed_costs: float = FIXED_COSTS_REFERENCE,
) -> int:
    """Unités à vendre pour couvrir les charges fixes de référence.

    Formule
    -------
    units = ceil(fixed_costs / (price_per_unit - cost_per_unit)), 0 si la
    marge unitaire n'est pas strictement positive.

    Exemple
    -------
    >>> break_even_units(15.0, 5.0)
    50
    >>> break_even_units(5.0, 5.0)
    0
    """
    profit_per_unit = price_per_unit - cost_per_unit
    if profit_per_unit > 0:
        return math.ceil(fixed_costs / profit_per_unit)
    return 0


# --------- Calculateur ---------


class PricingQuote(BaseModel):
    """Résultat du calculateur pour un lot de `quantity` unités."""

    total_cost: float
    quantity: int
    cost_per_unit: float
    calculated_price: float  # prix conseillé non arrondi
    actual_price: float  # prix saisi à la main, sinon le prix conseillé
    rounded_price: float  # prix rond proposé
    profit: float
    actual_profit_percent: float
    price_per_unit: float
    break_even_units: int

    @property
    def profit_per_unit(self) -> float:
        return ieee_div(self.profit, self.quantity)

    @property
    def rounded_profit(self) -> float:
        """Bénéfice si l'on vend au prix rond."""
        return self.rounded_price - self.total_cost

    @property
    def shows_break_even(self) -> bool:
        low, high = BREAK_EVEN_DISPLAY_RANGE
        return low <= self.break_even_units <= high


class BatchQuote(PricingQuote):
    """Devis d'un lot de recette avec le détail des coûts."""

    ingredients_cost: float
    packaging_cost: float
    delivery_cost: float


def price_quote(
    total_cost: float,
    quantity: int,
    profit_percent: float,
    custom_price: Optional[float] = None,
    fixed_costs: float = FIXED_COSTS_REFERENCE,
) -> PricingQuote:
    calculated = suggest_price(total_cost, profit_percent)
    actual = calculated if custom_price is None else custom_price
    cost_per_unit = ieee_div(total_cost, quantity)
    unit_price = ieee_div(actual, quantity)
    profit = actual - total_cost
    return PricingQuote(
        total_cost=total_cost,
        quantity=quantity,
        cost_per_unit=cost_per_unit,
        calculated_price=calculated,
        actual_price=actual,
        rounded_price=round_to_nice_price(calculated),
        profit=profit,
        actual_profit_percent=realized_profit_percent(actual, total_cost),
        price_per_unit=unit_price,
        break_even_units=break_even_units(unit_price, cost_per_unit, fixed_costs),
    )


def quote_recipe_batch(
    recipe: Recipe,
    ingredients: Sequence[Ingredient],
    quantity: int,
    profit_percent: float,
    packaging: Optional[Packaging] = None,
    include_delivery: bool = False,
    settings: Optional[PricingSettings] = None,
    custom_price: Optional[float] = None,
) -> BatchQuote:
    """Devis du calculateur : `quantity` unités de rendement d'une recette.

    Formule
    -------
    ingredients_cost = recipe_cost_per_yield_unit x quantity
    packaging_cost   = packaging.cost x quantity (0 sans emballage)
    delivery_cost    = settings.delivery_cost si livraison, sinon 0
    total_cost       = ingredients_cost + packaging_cost + delivery_cost
    """
    settings = settings or PricingSettings()
    ingredients_cost = recipe_cost_per_yield_unit(recipe, ingredients) * quantity
    packaging_cost = packaging.cost * quantity if packaging else 0.0
    delivery_cost = settings.delivery_cost if include_delivery else 0.0
    total_cost = ingredients_cost + packaging_cost + delivery_cost

    quote = price_quote(total_cost, quantity, profit_percent, custom_price)
    return BatchQuote(
        **quote.model_dump(),
        ingredients_cost=ingredients_cost,
        packaging_cost=packaging_cost,
        delivery_cost=delivery_cost,
    )


# --------- Coffrets ---------


class BundlePricing(BaseModel):
    live_ingredients_cost: float  # recalculé aux prix courants
    cached_ingredients_cost: Optional[float]  # instantané du dernier enregistrement
    suggested_price: float
    effective_price: float
    realized_profit_percent: float

    @property
    def is_stale(self) -> bool:
        """Vrai si l'instantané ne correspond plus au coût courant."""
        if self.cached_ingredients_cost is None:
            return True
        return not math.isclose(
            self.cached_ingredients_cost, self.live_ingredients_cost, abs_tol=1e-9
        )


def product_pricing(
    product: Product, recipes: Sequence[Recipe], ingredients: Sequence[Ingredient]
) -> BundlePricing:
    live = product_ingredients_cost(product, recipes, ingredients)
    suggested = suggest_bundle_price(live, product.profit_percent)
    effective = product.selling_price or suggested
    return BundlePricing(
        live_ingredients_cost=live,
        cached_ingredients_cost=product.ingredients_cost,
        suggested_price=suggested,
        effective_price=effective,
        realized_profit_percent=realized_profit_percent(effective, live),
    )


# --------- Coût complet (main d'oeuvre + frais généraux) ---------


class FullCostPricing(BaseModel):
    ingredients_cost: float
    labor_cost: float
    overhead_cost: float
    packaging_cost: float
    total_cost: float
    suggested_price: float
    gross_profit: float
    gross_profit_percent: float
    net_profit: float
    net_profit_percent: float


def _percent_of_price(amount: float, price: float) -> float:
    return amount / price * 100 if price else 0.0


def full_cost_pricing(
    recipe: Recipe,
    ingredients: Sequence[Ingredient],
    settings: PricingSettings,
    packaging: Optional[Packaging] = None,
) -> FullCostPricing:
    """Prix d'une exécution de recette en coût complet.

    Formule
    -------
    labor_cost    = labor_minutes / 60 x labor_cost_per_hour
    overhead_cost = ingredients_cost x overhead_percent / 100
    total_cost    = ingredients + labor + overhead + packaging
    price         = total_cost x (1 + profit_margin_percent / 100)
    gross_profit  = price - (ingredients + packaging)
    net_profit    = price - total_cost
    """
    ingredients_cost = recipe_total_cost(recipe, ingredients)
    labor_cost = recipe.labor_minutes / 60 * settings.labor_cost_per_hour
    overhead_cost = ingredients_cost * settings.overhead_percent / 100
    packaging_cost = packaging.cost if packaging else 0.0
    total_cost = ingredients_cost + labor_cost + overhead_cost + packaging_cost

    price = suggest_price(total_cost, settings.profit_margin_percent)
    gross = price - (ingredients_cost + packaging_cost)
    net = price - total_cost
    return FullCostPricing(
        ingredients_cost=ingredients_cost,
        labor_cost=labor_cost,
        overhead_cost=overhead_cost,
        packaging_cost=packaging_cost,
        total_cost=total_cost,
        suggested_price=price,
        gross_profit=gross,
        gross_profit_percent=_percent_of_price(gross, price),
        net_profit=net,
        net_profit_percent=_percent_of_price(net, price),
    )
