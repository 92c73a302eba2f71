"""
Règles de calcul pures : conversions d'unités, coûts matières, prix.
Aucune entrée/sortie, aucun état partagé.
"""
