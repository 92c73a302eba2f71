# bakeryops/domain/types.py
import time
import uuid
from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Unit(str, Enum):
    # Valeurs alignées avec les clés du document JSON
    KG = "kg"
    G = "g"
    L = "l"
    ML = "ml"
    UNIT = "unit"
    TSP = "tsp"
    TBSP = "tbsp"
    CUP = "cup"


class RecipeCategory(str, Enum):
    CAKE = "cake"
    COOKIE = "cookie"
    DESSERT = "dessert"
    BREAD = "bread"
    OTHER = "other"


class OrderStatus(str, Enum):
    PENDING = "pending"
    PREPARING = "preparing"
    READY = "ready"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class DocumentModel(BaseModel):
    """Base des entités du document : immuables, clés camelCase côté JSON.

    Les deux orthographes sont acceptées en entrée (`price_per_unit` ou
    `pricePerUnit`), la sérialisation `by_alias=True` redonne le format
    d'origine.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_document(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def now_ms() -> int:
    """Horodatage en millisecondes (format des champs created_at/updated_at)."""
    return int(time.time() * 1000)


def new_id() -> str:
    return str(uuid.uuid4())
