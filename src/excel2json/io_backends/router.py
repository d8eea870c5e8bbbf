from __future__ import annotations

from pathlib import Path
from typing import Dict, Type

from .base import BackendBase
from .csv_backend import CSVBackend
from .xlsx_backend import ExcelBackend


# Registry of available readers keyed by "kind"
_BACKENDS: Dict[str, Type[BackendBase]] = {
    "xlsx": ExcelBackend,
    "csv_dir": CSVBackend,
}


def available_kinds() -> list[str]:
    return sorted(_BACKENDS)


def guess_kind(path: str) -> str:
    """
    Pick a backend kind from the input path.

    A directory is read as csv_dir; anything else goes to the xlsx reader,
    which reports unreadable files itself.
    """
    if Path(path).is_dir():
        return "csv_dir"
    return "xlsx"


def make_backend(kind: str) -> BackendBase:
    """
    Factory returning an instance of the requested backend.

    Parameters
    ----------
    kind : str
        Short identifier used in config/CLI (e.g., 'xlsx', 'csv_dir').

    Returns
    -------
    BackendBase
        Fresh instance of the backend.

    Raises
    ------
    KeyError
        If `kind` is unknown.
    """
    k = (kind or "").strip().lower()
    cls = _BACKENDS.get(k)
    if cls is None:
        available = ", ".join(available_kinds())
        raise KeyError(f"Unknown backend kind '{kind}'. Available: {available}")
    return cls()
