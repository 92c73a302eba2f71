"""
Point d'entrée data avec imports retardés pour éviter les boucles.
Expose des getters plutôt que des objets globaux calculés au chargement.
"""


def get_DEFAULT_APP_DATA():
    from .defaults import default_app_data

    return default_app_data()


def get_DEMO_BAKERY():
    from .demo_bakery import build_demo_bakery

    return build_demo_bakery()
