from __future__ import annotations

from typing import Any, Sequence

from ..domain.convert import Grid


def _is_blank_row(row: Sequence[Any]) -> bool:
    return all(v is None or (isinstance(v, str) and v == "") for v in row)


def trim_blank_rows(rows: Sequence[Sequence[Any]]) -> Grid:
    """
    Drop completely empty rows before the first and after the last used row.
    Empty rows in between stay (they still produce records).
    """
    start, end = 0, len(rows)
    while start < end and _is_blank_row(rows[start]):
        start += 1
    while end > start and _is_blank_row(rows[end - 1]):
        end -= 1
    return [list(r) for r in rows[start:end]]


class BackendBase:
    """
    Reads one sheet of a source into a Grid (list of rows of raw cell values).

    The first row of the returned Grid is the header row. Implementations
    raise FileOpenError / SheetNotFoundError from excel2json.errors.
    """

    kind: str = ""

    def read_grid(self, path: str, sheet: str) -> Grid:
        raise NotImplementedError
