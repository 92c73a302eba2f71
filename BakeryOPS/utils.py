import json
from pathlib import Path
from typing import Callable, Iterable, Optional, Type, TypeVar

import numpy as np
from pydantic import BaseModel

M = TypeVar("M", bound=BaseModel)


def ieee_div(numerator: float, denominator: float) -> float:
    """Division flottante IEEE-754, sans exception.

    x/0 donne ±inf et 0/0 donne nan : les diviseurs dégénérés (contenance
    ou rendement nuls) se propagent en valeur non finie au lieu de lever
    ZeroDivisionError.

    >>> ieee_div(30, 3)
    10.0
    >>> ieee_div(12, 0)
    inf
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def find_by_id(items: Iterable, item_id: str) -> Optional[object]:
    """Premier élément dont l'id correspond, sinon None (référence absente tolérée)."""
    return next((item for item in items if item.id == item_id), None)


def load_and_validate(
    data_path: Path, model: Type[M], prepare: Optional[Callable[[dict], dict]] = None
) -> M:
    """
    Load and validate model data from data_path.
    `prepare` may complete the raw JSON before validation.
    Returns a validated model instance.
    """
    if not data_path.exists():
        raise FileNotFoundError(f"Data file not found: {data_path}")

    with data_path.open("r", encoding="utf-8") as f:
        raw_data = json.load(f)
        if prepare is not None:
            raw_data = prepare(raw_data)
        return model.model_validate(raw_data)
