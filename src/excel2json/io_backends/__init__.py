from .base import BackendBase, Grid
from .csv_backend import CSVBackend
from .json_backend import write_records
from .router import available_kinds, guess_kind, make_backend
from .xlsx_backend import ExcelBackend

__all__ = [
    "BackendBase",
    "CSVBackend",
    "ExcelBackend",
    "Grid",
    "available_kinds",
    "guess_kind",
    "make_backend",
    "write_records",
]
