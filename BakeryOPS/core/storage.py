"""
Persistance locale du document et export/import JSON.

Remplacement du document entier à chaque sauvegarde (pas de mise à jour
partielle). Un import est entièrement validé avant de toucher à l'état.
"""

import json
import logging
from datetime import date as Date
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from BakeryOPS.core.errors import DataImportError, StorageError
from BakeryOPS.data import get_DEFAULT_APP_DATA
from BakeryOPS.data.defaults import DEFAULT_PACKAGINGS, DEFAULT_SETTINGS
from BakeryOPS.domain.app_data import AppData
from BakeryOPS.domain.settings import PricingSettings
from BakeryOPS.utils import load_and_validate

log = logging.getLogger("bakeryops.storage")


def merge_with_defaults(raw: dict) -> dict:
    """Complète un document brut avec les valeurs par défaut.

    Chaque collection présente remplace celle par défaut en bloc ; les
    réglages sont complétés champ par champ, sous l'une ou l'autre
    orthographe (`deliveryCost` ou `delivery_cost`).
    """
    if not isinstance(raw, dict):
        raise TypeError(f"expected a JSON object, got {type(raw).__name__}")
    merged = {
        "ingredients": [],
        "recipes": [],
        "packagings": DEFAULT_PACKAGINGS,
        "products": [],
        "orders": [],
        **raw,
    }
    given = PricingSettings.model_validate(raw.get("settings") or {})
    merged["settings"] = {**DEFAULT_SETTINGS, **given.model_dump(by_alias=True, exclude_unset=True)}
    return merged


def export_data(data: AppData) -> str:
    """Document complet au format JSON portable (clés camelCase)."""
    return json.dumps(data.to_document(), ensure_ascii=False, indent=2)


def export_filename(today: Optional[Date] = None) -> str:
    today = today or Date.today()
    return f"bakery-pricing-backup-{today.isoformat()}.json"


def import_data(text: Union[str, bytes]) -> AppData:
    """Parse et valide un export ; lève DataImportError sans effet de bord."""
    try:
        raw = json.loads(text)
        return AppData.model_validate(merge_with_defaults(raw))
    except (json.JSONDecodeError, TypeError, ValidationError) as e:
        raise DataImportError(f"Invalid bakery document: {e}") from e


class JsonFileStore:
    """Fournisseur de persistance sur fichier JSON local."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def load(self) -> AppData:
        """Charge le document ; document par défaut si le fichier n'existe pas."""
        if not self.path.exists():
            log.info("no data file at %s, starting from defaults", self.path)
            return get_DEFAULT_APP_DATA()
        try:
            return load_and_validate(self.path, AppData, prepare=merge_with_defaults)
        except (json.JSONDecodeError, TypeError, ValidationError) as e:
            raise StorageError(f"Unreadable data file {self.path}: {e}") from e

    def save(self, data: AppData) -> bool:
        """Écrit le document entier ; False en cas d'échec (état mémoire intact)."""
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(export_data(data), encoding="utf-8")
            tmp.replace(self.path)
        except OSError as e:
            log.error("Error saving data to %s: %s", self.path, e)
            return False
        log.debug("saved %s", self.path)
        return True

    def import_file(self, source: Union[str, Path]) -> AppData:
        """Importe un export puis le persiste ; rien n'est écrit si l'import échoue.

        Lève StorageError si le document importé n'a pas pu être écrit.
        """
        source = Path(source)
        try:
            text = source.read_text(encoding="utf-8")
        except OSError as e:
            raise DataImportError(f"Cannot read {source}: {e}") from e
        data = import_data(text)
        if not self.save(data):
            raise StorageError(f"Imported document could not be saved to {self.path}")
        return data

    def export_file(self, data: AppData, directory: Union[str, Path], today: Optional[Date] = None) -> Path:
        target = Path(directory) / export_filename(today)
        target.write_text(export_data(data), encoding="utf-8")
        log.info("exported data to %s", target)
        return target
