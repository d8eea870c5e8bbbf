from __future__ import annotations

import re
from typing import Any, List, Optional, Sequence

from ..errors import InvalidSelectorError, SelectorOutOfRangeError
from .records import render_cell

# optional "+", ASCII digits only
_COLUMN_NUMBER = re.compile(r"\+?[0-9]+")


def visible_column_indices(header_row: Sequence[Any]) -> List[int]:
    """
    Indices (0-based) of all header cells with non-blank text, left to right.

    Example: ["Name", "Age", "", "Email", "", "Phone"] -> [0, 1, 3, 5]
    """
    return [idx for idx, cell in enumerate(header_row) if render_cell(cell).strip()]


def parse_column_selection(selector: str, visible: Sequence[int]) -> List[int]:
    """
    Map a comma-separated list of 1-based visible-column numbers onto grid indices.

    Numbers count visible columns only, so with visible = [0, 2, 5, 7]
    the selector "1,3" resolves to [0, 5]. Order and duplicates are kept.

    Raises
    ------
    InvalidSelectorError
        A token is not a non-negative integer.
    SelectorOutOfRangeError
        A token is 0 or larger than the number of visible columns.
    """
    out: List[int] = []
    for position, raw in enumerate(selector.split(","), start=1):
        token = raw.strip()
        if not _COLUMN_NUMBER.fullmatch(token):
            raise InvalidSelectorError(
                f"Invalid column number {token!r} at position {position}",
                context={"token": token, "position": position},
            )
        n = int(token)
        if n == 0:
            raise SelectorOutOfRangeError(
                "Column numbers must be greater than 0",
                context={"token": token, "position": position, "bound": "low"},
            )
        if n > len(visible):
            raise SelectorOutOfRangeError(
                f"Column number {n} exceeds visible column count ({len(visible)})",
                context={
                    "token": token,
                    "position": position,
                    "bound": "high",
                    "visible_count": len(visible),
                },
            )
        out.append(visible[n - 1])
    return out


def select_columns(visible: Sequence[int], selector: Optional[str] = None) -> List[int]:
    """All visible columns unless an explicit selector is given."""
    if selector is None:
        return list(visible)
    return parse_column_selection(selector, visible)
