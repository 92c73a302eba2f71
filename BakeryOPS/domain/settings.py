from typing import Optional

from pydantic import Field

from BakeryOPS.domain.types import DocumentModel, new_id


class Packaging(DocumentModel):
    id: str = Field(default_factory=new_id)
    name: str
    cost: float
    notes: Optional[str] = None


class PricingSettings(DocumentModel):
    """Réglages globaux du calcul de prix (valeurs par défaut du document)."""

    labor_cost_per_hour: float = 50.0  # coût d'une heure de travail
    profit_margin_percent: float = 30.0  # marge bénéficiaire visée
    delivery_cost: float = 30.0  # frais de livraison par défaut
    overhead_percent: float = 10.0  # frais généraux (électricité, gaz...)
