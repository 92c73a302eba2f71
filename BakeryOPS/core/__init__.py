from .errors import BakeryOPSError, DataImportError, StorageError
from .orders import order_total
from .reports import build_report, filter_orders
from .storage import JsonFileStore, export_data, import_data

__all__ = [
    "BakeryOPSError",
    "DataImportError",
    "JsonFileStore",
    "StorageError",
    "build_report",
    "export_data",
    "filter_orders",
    "import_data",
    "order_total",
]
