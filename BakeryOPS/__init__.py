"""
BakeryOPS package

Noyau de gestion d'une pâtisserie artisanale : coûts des ingrédients,
recettes, coffrets vendus, commandes clients et prix de vente conseillés.
Le découpage reprend celui de FoodOps : objets métier (domain), règles
de calcul pures (rules), opérations applicatives (core), données par
défaut (data) et affichage console (ui).
"""

__all__ = ["core", "domain", "data", "rules", "ui"]
