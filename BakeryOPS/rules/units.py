"""
Conversions d'unités de mesure pour le calcul des coûts recettes.
"""

from typing import Dict, Tuple, Union

from BakeryOPS.domain.types import Unit

UnitLike = Union[Unit, str]

# (depuis, vers) -> (multiplicateur, diviseur)
# Conversions directionnelles : ml -> tbsp n'existe pas, c'est voulu.
CONVERSIONS: Dict[Tuple[Unit, Unit], Tuple[float, float]] = {
    (Unit.KG, Unit.G): (1000, 1),
    (Unit.G, Unit.KG): (1, 1000),
    (Unit.L, Unit.ML): (1000, 1),
    (Unit.ML, Unit.L): (1, 1000),
    # cuillères et tasses : approximations en volume
    (Unit.TBSP, Unit.ML): (15, 1),
    (Unit.TBSP, Unit.L): (15, 1000),
    (Unit.TSP, Unit.ML): (5, 1),
    (Unit.TSP, Unit.L): (5, 1000),
    (Unit.CUP, Unit.ML): (240, 1),
    (Unit.CUP, Unit.L): (240, 1000),
}


def is_convertible(from_unit: UnitLike, to_unit: UnitLike) -> bool:
    """Vrai si une règle de conversion existe (ou si les unités sont égales).

    Exemple
    -------
    >>> is_convertible("cup", "l")
    True
    >>> is_convertible("ml", "tbsp")
    False
    """
    src, dst = Unit(from_unit), Unit(to_unit)
    return src == dst or (src, dst) in CONVERSIONS


def convert(quantity: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    """Convertit une quantité d'une unité vers une autre de la même famille.

    Formule
    -------
    result = quantity x multiplicateur / diviseur

    Toute paire non prévue (masse <-> volume, ml -> cuillère, `unit` vers
    autre chose) renvoie la quantité telle quelle : repli identité, pas
    d'erreur.

    Exemple
    -------
    >>> convert(1, "kg", "g")
    1000.0
    >>> convert(500, "g", "kg")
    0.5
    >>> convert(2, "tbsp", "ml")
    30.0
    >>> convert(1, "cup", "l")
    0.24
    >>> convert(1, "ml", "tbsp")
    1
    """
    src, dst = Unit(from_unit), Unit(to_unit)
    if src == dst:
        return quantity
    rule = CONVERSIONS.get((src, dst))
    if rule is None:
        return quantity
    mult, div = rule
    return quantity * mult / div
