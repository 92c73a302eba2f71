# bakeryops/domain/ingredients.py
"""
Ingrédient acheté en paquet : le prix unitaire est dérivé du prix et de la
contenance du paquet.
"""

from typing import Optional

from pydantic import Field, model_validator

from BakeryOPS.domain.types import DocumentModel, Unit, new_id, now_ms


class Ingredient(DocumentModel):
    id: str = Field(default_factory=new_id)
    name: str
    price_per_unit: float  # prix par unité de mesure (dérivé)
    package_price: float  # prix du paquet
    package_quantity: float  # contenance du paquet, dans `unit`
    unit: Unit
    supplier: Optional[str] = None
    notes: Optional[str] = None
    created_at: int = Field(default_factory=now_ms)
    updated_at: int = Field(default_factory=now_ms)

    @model_validator(mode="before")
    @classmethod
    def _backfill_package(cls, data):
        # Anciens documents : seul pricePerUnit existait (paquet de 1)
        if isinstance(data, dict):
            ppu = data.get("pricePerUnit", data.get("price_per_unit"))
            if ppu is not None:
                if "packagePrice" not in data and "package_price" not in data:
                    data = {**data, "packagePrice": ppu}
                if "packageQuantity" not in data and "package_quantity" not in data:
                    data = {**data, "packageQuantity": 1}
        return data

    @classmethod
    def from_package(
        cls, name: str, package_price: float, package_quantity: float, unit: Unit, **extra
    ) -> "Ingredient":
        """Crée un ingrédient en dérivant `price_per_unit` du paquet."""
        from BakeryOPS.rules.costing import price_per_unit

        return cls(
            name=name,
            package_price=package_price,
            package_quantity=package_quantity,
            price_per_unit=price_per_unit(package_price, package_quantity),
            unit=unit,
            **extra,
        )
