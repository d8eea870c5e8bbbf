from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import List

import pandas as pd

from ..errors import FileOpenError, SheetNotFoundError
from .base import BackendBase, Grid, trim_blank_rows

log = logging.getLogger("excel2json.io.csv")

_ENCODING = "utf-8-sig"  # a leading BOM is not part of the first header


class CSVBackend(BackendBase):
    """
    Directory of CSV files, one file per sheet (e.g. products.csv -> sheet "products").

    - everything is read as text, empty fields stay ""
    - every line keeps its own field count: missing trailing fields are
      absent (short row), extra fields are kept (wide row)
    - empty lines become empty rows
    """

    kind = "csv_dir"

    def __init__(self, delimiter: str = ",") -> None:
        self.delimiter = delimiter

    def _field_counts(self, p: Path) -> List[int]:
        """Number of fields on every record of the file, in file order."""
        with p.open("r", encoding=_ENCODING, newline="") as f:
            return [len(r) for r in csv.reader(f, delimiter=self.delimiter)]

    def read_grid(self, path: str, sheet: str) -> Grid:
        in_dir = Path(path)
        if not in_dir.is_dir():
            raise FileOpenError(f"CSV directory not found: {in_dir}", context={"path": str(in_dir)})

        p = in_dir / f"{sheet}.csv"
        if not p.is_file():
            available = ", ".join(sorted(c.stem for c in in_dir.glob("*.csv")))
            raise SheetNotFoundError(
                f"Sheet '{sheet}' not found in {in_dir}. Available: {available}",
                context={"path": str(in_dir), "sheet": sheet},
            )

        try:
            counts = self._field_counts(p)
            width = max(counts, default=0)
            if width == 0:
                log.debug("%s is empty", p)
                return []
            # fixed width, so lines wider than the first one parse too
            raw = pd.read_csv(
                p,
                header=None,
                names=range(width),
                dtype=str,
                keep_default_na=False,
                na_values=[],
                skip_blank_lines=False,
                sep=self.delimiter,
                encoding=_ENCODING,
            )
        except (csv.Error, pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
            raise FileOpenError(f"Failed to read CSV file: {p} ({e})", context={"path": str(p)}) from e

        values = raw.astype(object).values.tolist()
        if len(values) != len(counts):
            raise FileOpenError(
                f"Failed to read CSV file: {p} (found {len(values)} rows, expected {len(counts)})",
                context={"path": str(p)},
            )

        # pandas pads short lines with "", cut every row back to its real length
        rows = [row[:n] for row, n in zip(values, counts)]
        grid = trim_blank_rows(rows)
        log.debug("read %d row(s) from %s", len(grid), p)
        return grid
