"""
Édition du document : création/mise à jour/suppression dans les collections.

Chaque opération renvoie un nouvel `AppData` (les modèles sont immuables) ;
l'appelant décide ensuite de le persister. Une suppression ne se propage
pas : les recettes ou coffrets qui pointaient vers l'élément supprimé le
comptent simplement pour 0.
"""

import logging
from typing import List, Optional, Tuple, TypeVar

import numpy as np
from pydantic.alias_generators import to_camel

from BakeryOPS.domain.app_data import AppData
from BakeryOPS.domain.ingredients import Ingredient
from BakeryOPS.domain.order import Order
from BakeryOPS.domain.product import Product
from BakeryOPS.domain.recipe import Recipe
from BakeryOPS.domain.settings import Packaging, PricingSettings
from BakeryOPS.domain.types import new_id, now_ms
from BakeryOPS.rules.costing import price_per_unit, product_ingredients_cost
from BakeryOPS.rules.pricing import suggest_bundle_price
from BakeryOPS.utils import find_by_id

log = logging.getLogger("bakeryops.catalog")

COLLECTIONS = ("ingredients", "recipes", "packagings", "products", "orders")

E = TypeVar("E")


def _upsert(items: List[E], entity: E) -> Tuple[List[E], bool]:
    """Remplace l'élément de même id, sinon l'ajoute en fin de liste."""
    replaced = False
    out = []
    for item in items:
        if item.id == entity.id:
            out.append(entity)
            replaced = True
        else:
            out.append(item)
    if not replaced:
        out.append(entity)
    return out, replaced


def _stamp(entity: E, items: List[E]) -> E:
    """Garde created_at de la version existante, met à jour updated_at."""
    now = now_ms()
    existing = find_by_id(items, entity.id)
    created = existing.created_at if existing is not None else entity.created_at
    return entity.model_copy(update={"created_at": created, "updated_at": now})


def _save(data: AppData, collection: str, entity) -> AppData:
    items = getattr(data, collection)
    updated, replaced = _upsert(items, entity)
    log.info("%s %s in %s", "updated" if replaced else "created", entity.id, collection)
    return data.model_copy(update={collection: updated})


# --------- Ingrédients / recettes / emballages / commandes ---------


def save_ingredient(data: AppData, ingredient: Ingredient) -> AppData:
    """Enregistre un ingrédient en recalculant son prix unitaire du paquet."""
    ingredient = _stamp(ingredient, data.ingredients).model_copy(
        update={
            "price_per_unit": price_per_unit(
                ingredient.package_price, ingredient.package_quantity
            )
        }
    )
    return _save(data, "ingredients", ingredient)


def save_recipe(data: AppData, recipe: Recipe) -> AppData:
    return _save(data, "recipes", _stamp(recipe, data.recipes))


def save_packaging(data: AppData, packaging: Packaging) -> AppData:
    return _save(data, "packagings", packaging)


def save_order(data: AppData, order: Order) -> AppData:
    return _save(data, "orders", _stamp(order, data.orders))


# --------- Coffrets ---------


def save_product(data: AppData, product: Product, manual_price: Optional[float] = None) -> AppData:
    """Enregistre un coffret avec l'instantané de son coût matières.

    Prix de vente : prix saisi arrondi à l'unité supérieure, sinon le prix
    conseillé du coffret.
    """
    cost = product_ingredients_cost(product, data.recipes, data.ingredients)
    if manual_price:
        selling_price = float(np.ceil(manual_price))
    else:
        selling_price = suggest_bundle_price(cost, product.profit_percent)
    product = _stamp(product, data.products).model_copy(
        update={"ingredients_cost": cost, "selling_price": selling_price}
    )
    return _save(data, "products", product)


def duplicate_product(data: AppData, product_id: str, suffix: str = " (copy)") -> AppData:
    source = find_by_id(data.products, product_id)
    if source is None:
        log.warning("duplicate skipped: product %s not found", product_id)
        return data
    now = now_ms()
    copy = source.model_copy(
        update={
            "id": new_id(),
            "name": f"{source.name}{suffix}",
            "components": list(source.components),
            "created_at": now,
            "updated_at": now,
        }
    )
    return _save(data, "products", copy)


def toggle_product_active(data: AppData, product_id: str) -> AppData:
    products = [
        p.model_copy(update={"is_active": not p.is_active, "updated_at": now_ms()})
        if p.id == product_id
        else p
        for p in data.products
    ]
    return data.model_copy(update={"products": products})


# --------- Suppression / réglages ---------


def delete(data: AppData, collection: str, item_id: str) -> AppData:
    if collection not in COLLECTIONS:
        raise ValueError(f"Unknown collection '{collection}'")
    items = getattr(data, collection)
    kept = [item for item in items if item.id != item_id]
    if len(kept) != len(items):
        log.info("deleted %s from %s", item_id, collection)
    return data.model_copy(update={collection: kept})


def update_settings(data: AppData, **changes) -> AppData:
    """Seul point de modification des réglages de prix.

    Les clés acceptées sont les noms de champ ou leurs alias camelCase ; une
    clé inconnue lève ValueError.
    """
    known = {n for name in PricingSettings.model_fields for n in (name, to_camel(name))}
    unknown = sorted(set(changes) - known)
    if unknown:
        raise ValueError(f"Unknown pricing settings: {unknown}")
    settings = PricingSettings.model_validate({**data.settings.model_dump(), **changes})
    log.info("settings updated: %s", sorted(changes))
    return data.model_copy(update={"settings": settings})
