from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

_FILE_KEYS = ("kind", "columns", "indent", "ensure_ascii")


@dataclass(frozen=True)
class ConvertConfig:
    """Everything one conversion run needs."""

    input_path: str
    sheet: str
    output_path: str
    columns: Optional[str] = None
    kind: Optional[str] = None  # None -> guessed from input_path
    indent: int = 2
    ensure_ascii: bool = False


def load_config_file(path: str) -> Dict[str, Any]:
    """
    Read a YAML config. Example:

        kind: xlsx
        indent: 4
        columns: "1,2"
        sheets:
          Orders:
            columns: "1,3,5"
    """
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config {path} must contain a mapping, got {type(raw).__name__}")
    return raw


def _coerce_columns(value: Any) -> Optional[str]:
    # YAML turns `columns: 3` into an int and `columns: [1, 2]` into a list
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


def build_config(
    file_values: Optional[Dict[str, Any]],
    *,
    input_path: str,
    sheet: str,
    output_path: str,
    columns: Optional[str] = None,
    kind: Optional[str] = None,
    indent: Optional[int] = None,
    ensure_ascii: Optional[bool] = None,
) -> ConvertConfig:
    """
    Merge config-file values with CLI values.

    Precedence (highest first): CLI, sheets.<sheet> section, top level.
    """
    file_values = file_values or {}
    merged: Dict[str, Any] = {k: file_values[k] for k in _FILE_KEYS if k in file_values}

    sheet_sec = (file_values.get("sheets") or {}).get(sheet) or {}
    merged.update({k: sheet_sec[k] for k in _FILE_KEYS if k in sheet_sec})

    cli = {"columns": columns, "kind": kind, "indent": indent, "ensure_ascii": ensure_ascii}
    merged.update({k: v for k, v in cli.items() if v is not None})

    return ConvertConfig(
        input_path=input_path,
        sheet=sheet,
        output_path=output_path,
        columns=_coerce_columns(merged.get("columns")),
        kind=merged.get("kind"),
        indent=int(merged.get("indent", 2)),
        ensure_ascii=bool(merged.get("ensure_ascii", False)),
    )
