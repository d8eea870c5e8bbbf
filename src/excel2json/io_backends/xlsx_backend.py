from __future__ import annotations

import logging
import zipfile
from pathlib import Path

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from ..errors import FileOpenError, SheetNotFoundError
from .base import BackendBase, Grid, trim_blank_rows

log = logging.getLogger("excel2json.io.xlsx")


class ExcelBackend(BackendBase):
    """
    XLSX reader backed by openpyxl.

    Formula cells yield their cached value (data_only=True); blank cells
    inside the used range come back as None.
    """

    kind = "xlsx"

    def read_grid(self, path: str, sheet: str) -> Grid:
        p = Path(path)
        try:
            wb = load_workbook(p, read_only=True, data_only=True)
        except (OSError, InvalidFileException, zipfile.BadZipFile, KeyError) as e:
            raise FileOpenError(
                f"Failed to open Excel file: {p} ({e})", context={"path": str(p)}
            ) from e

        try:
            if sheet not in wb.sheetnames:
                available = ", ".join(wb.sheetnames)
                raise SheetNotFoundError(
                    f"Sheet '{sheet}' not found in {p}. Available: {available}",
                    context={"path": str(p), "sheet": sheet, "available": list(wb.sheetnames)},
                )
            ws = wb[sheet]
            rows = list(ws.iter_rows(values_only=True))
        finally:
            wb.close()

        grid = trim_blank_rows(rows)
        log.debug("read %d row(s) from %s[%s]", len(grid), p, sheet)
        return grid
