from __future__ import annotations

from typing import Any, Dict, List, Sequence, Tuple

from .records import render_cell

# A header consisting of nothing but one of these symbols gets a word instead.
SYMBOL_NAMES: Dict[str, str] = {
    "#": "number",
    "@": "at",
    "%": "percent",
    "$": "usd",
    "/": "slash",
    "&": "and",
}

# Applied in this order; " & " must come before the bare "&".
_REPLACEMENTS: Tuple[Tuple[str, str], ...] = (
    (" & ", "_and_"),
    ("&", "_and_"),
    ("/", "_"),
    ("@", "_at_"),
    ("#", "_"),
    ("%", "_percent"),
    ("$", "_usd"),
    ("(", ""),
    (")", ""),
    (" ", "_"),
)


def normalize_header(name: str) -> str:
    """
    Turn a raw column header into a JSON-friendly key.

    - "First Name"    -> "first_name"
    - "#"             -> "number"
    - "Sales/Revenue" -> "sales_revenue"
    - "Profit & Loss" -> "profit_and_loss"

    Never fails; an empty or all-symbol header may come out as "".
    """
    trimmed = name.strip()

    result = SYMBOL_NAMES.get(trimmed)
    if result is None:
        result = trimmed.lower()
        for old, new in _REPLACEMENTS:
            result = result.replace(old, new)

    return "_".join(seg for seg in result.split("_") if seg)


def extract_headers(header_row: Sequence[Any], columns: Sequence[int]) -> List[str]:
    """Normalized header for every selected column, in selection order."""
    headers: List[str] = []
    for idx in columns:
        if idx < len(header_row):
            headers.append(normalize_header(render_cell(header_row[idx])))
        else:
            headers.append(f"column_{idx + 1}")
    return headers
