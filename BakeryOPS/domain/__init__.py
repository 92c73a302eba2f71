"""
Domain objects for BakeryOPS.

The domain layer holds the business objects of the bakery: ingredients,
recipes, product bundles, orders, packagings and pricing settings, all
gathered in one `AppData` document. They are immutable pydantic models so
the calculators in `rules` and `core` can stay pure functions.
"""

from .types import OrderStatus, RecipeCategory, Unit
from .ingredients import Ingredient
from .recipe import Recipe, RecipeIngredient
from .product import Product, ProductComponent
from .settings import Packaging, PricingSettings
from .order import CUSTOM_PRODUCT_ID, Order, OrderItem
from .app_data import AppData

__all__ = [
    "AppData",
    "CUSTOM_PRODUCT_ID",
    "Ingredient",
    "Order",
    "OrderItem",
    "OrderStatus",
    "Packaging",
    "PricingSettings",
    "Product",
    "ProductComponent",
    "Recipe",
    "RecipeCategory",
    "RecipeIngredient",
    "Unit",
]
