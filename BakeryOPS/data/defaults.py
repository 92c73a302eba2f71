"""
Paramètres et document par défaut (premier lancement, import incomplet).
"""

from BakeryOPS.domain.app_data import AppData
from BakeryOPS.domain.settings import Packaging, PricingSettings

# Réglages par défaut, repris champ par champ à l'import
DEFAULT_SETTINGS = {
    "laborCostPerHour": 50,
    "profitMarginPercent": 30,
    "deliveryCost": 30,
    "overheadPercent": 10,
}

# Catalogue d'emballages au premier lancement
DEFAULT_PACKAGINGS = [
    {"id": "1", "name": "קופסה רגילה", "cost": 5},  # boîte standard
    {"id": "2", "name": "קופסה מהודרת", "cost": 15},  # boîte de luxe
    {"id": "3", "name": "שקית צלופן", "cost": 2},  # sachet cellophane
]

# Charges fixes de référence pour le point mort (₪).
# Constante simplifiée, non dérivée des réglages.
FIXED_COSTS_REFERENCE = 500.0

# Marge par défaut du formulaire coffret (%)
DEFAULT_BUNDLE_PROFIT_PERCENT = 100.0

# Fenêtre d'affichage du point mort (présentation uniquement)
BREAK_EVEN_DISPLAY_RANGE = (1, 999)


def default_app_data() -> AppData:
    return AppData(
        packagings=[Packaging.model_validate(p) for p in DEFAULT_PACKAGINGS],
        settings=PricingSettings.model_validate(DEFAULT_SETTINGS),
    )
