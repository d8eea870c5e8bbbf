from .columns import parse_column_selection, select_columns, visible_column_indices
from .convert import Conversion, Grid, grid_to_records
from .headers import extract_headers, normalize_header
from .records import Record, build_record, build_records, render_cell

__all__ = [
    "Conversion",
    "Grid",
    "Record",
    "build_record",
    "build_records",
    "extract_headers",
    "grid_to_records",
    "normalize_header",
    "parse_column_selection",
    "render_cell",
    "select_columns",
    "visible_column_indices",
]
