from typing import List, Optional

from pydantic import Field

from BakeryOPS.domain.types import DocumentModel, new_id, now_ms


class ProductComponent(DocumentModel):
    recipe_id: str
    quantity: int  # nombre d'unités de rendement de la recette


class Product(DocumentModel):
    """Coffret vendu : une composition de sorties de recettes.

    `ingredients_cost` est l'instantané du coût matières au dernier
    enregistrement ; il peut dériver des prix courants jusqu'au prochain
    recalcul (voir `rules.pricing.product_pricing`).
    """

    id: str = Field(default_factory=new_id)
    name: str
    description: Optional[str] = None
    components: List[ProductComponent] = Field(default_factory=list)
    ingredients_cost: Optional[float] = None
    profit_percent: Optional[float] = None
    selling_price: float = 0.0
    is_active: bool = True
    created_at: int = Field(default_factory=now_ms)
    updated_at: int = Field(default_factory=now_ms)
