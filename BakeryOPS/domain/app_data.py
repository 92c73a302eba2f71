from typing import Dict, List, Optional

from pydantic import Field

from BakeryOPS.domain.ingredients import Ingredient
from BakeryOPS.domain.order import Order
from BakeryOPS.domain.product import Product
from BakeryOPS.domain.recipe import Recipe
from BakeryOPS.domain.settings import Packaging, PricingSettings
from BakeryOPS.domain.types import DocumentModel


class AppData(DocumentModel):
    """Document agrégé : toutes les collections + réglages."""

    ingredients: List[Ingredient] = Field(default_factory=list)
    recipes: List[Recipe] = Field(default_factory=list)
    packagings: List[Packaging] = Field(default_factory=list)
    products: List[Product] = Field(default_factory=list)
    orders: List[Order] = Field(default_factory=list)
    settings: PricingSettings = Field(default_factory=PricingSettings)

    # --------- Index par id ---------
    def ingredients_by_id(self) -> Dict[str, Ingredient]:
        return {i.id: i for i in self.ingredients}

    def find_packaging(self, packaging_id: str) -> Optional[Packaging]:
        return next((p for p in self.packagings if p.id == packaging_id), None)
