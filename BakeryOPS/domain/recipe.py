from typing import List, Optional

from pydantic import Field

from BakeryOPS.domain.types import DocumentModel, RecipeCategory, Unit, new_id, now_ms


class RecipeIngredient(DocumentModel):
    """Ligne de recette : quantité d'un ingrédient, dans l'unité de la recette."""

    ingredient_id: str
    quantity: float
    unit: Unit


class Recipe(DocumentModel):
    id: str = Field(default_factory=new_id)
    name: str
    category: RecipeCategory = RecipeCategory.OTHER
    ingredients: List[RecipeIngredient] = Field(default_factory=list)
    # "yield" est un mot réservé Python : alias explicite vers la clé JSON
    yield_units: int = Field(default=1, alias="yield")
    yield_unit: str = ""  # ex: "pièces", "parts", "gâteaux"
    labor_minutes: float = Field(default=0.0, ge=0)
    notes: Optional[str] = None
    created_at: int = Field(default_factory=now_ms)
    updated_at: int = Field(default_factory=now_ms)
