# bakeryops/core/config.py
import logging
import os
from dataclasses import dataclass
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True)
class Paths:
    ROOT: str = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
    DATA_FILE: str = os.getenv(
        "BAKERY_DATA_FILE", os.path.join(ROOT, "data", "bakery-pricing-data.json")
    )


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure le logging global (les loggers de module en héritent)."""
    level = (level or os.getenv("BAKERY_LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    return logging.getLogger("bakeryops")
