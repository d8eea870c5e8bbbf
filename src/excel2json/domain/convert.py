from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from ..errors import EmptySheetError
from .columns import select_columns, visible_column_indices
from .headers import extract_headers
from .records import Record, build_records

Grid = List[List[Any]]  # rows of raw cell values, header row first

log = logging.getLogger("excel2json.domain")


@dataclass(frozen=True)
class Conversion:
    columns: Tuple[int, ...]
    headers: Tuple[str, ...]
    records: List[Record]


def grid_to_records(grid: Grid, selector: Optional[str] = None) -> Conversion:
    """
    Header row + data rows -> list of records.

    The first row is always consumed as the header; a grid with only
    a header row yields no records.

    Parameters
    ----------
    grid : Grid
        Rows of raw cell values as produced by a backend.
    selector : str | None
        Comma-separated 1-based visible-column numbers; None selects
        every visible column.
    """
    if not grid:
        raise EmptySheetError("Sheet is empty, no header row found")

    header_row = grid[0]
    visible = visible_column_indices(header_row)
    log.debug("visible columns: %s", visible)

    columns = select_columns(visible, selector)
    headers = extract_headers(header_row, columns)
    log.debug("selected columns=%s headers=%s", columns, headers)

    records = list(build_records(grid[1:], columns, headers))
    return Conversion(columns=tuple(columns), headers=tuple(headers), records=records)
