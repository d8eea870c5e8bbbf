from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, Optional, Sequence

Record = Dict[str, Optional[str]]


def render_cell(value: Any) -> str:
    """
    Text form of a single cell, used for headers and values alike.

    Numbers are not reformatted: 25 (int), 25.0 (float) and "25" (text)
    all come out as "25".
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def build_record(row: Sequence[Any], columns: Sequence[int], headers: Sequence[str]) -> Record:
    """
    One data row -> {header: text}.

    Cells beyond the end of a short row become None (JSON null).
    Repeated keys keep their first position but take the last value.
    """
    record: Record = {}
    for key, idx in zip(headers, columns):
        record[key] = render_cell(row[idx]) if idx < len(row) else None
    return record


def build_records(
    rows: Iterable[Sequence[Any]],
    columns: Sequence[int],
    headers: Sequence[str],
) -> Iterator[Record]:
    for row in rows:
        yield build_record(row, columns, headers)
