class BakeryOPSError(ValueError):
    """Erreur applicative de base."""


class StorageError(BakeryOPSError):
    """Document stocké illisible ou invalide."""


class DataImportError(BakeryOPSError):
    """Import rejeté : l'état courant n'a pas été modifié."""
