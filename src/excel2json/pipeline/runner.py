from __future__ import annotations

import logging
from dataclasses import dataclass

from ..domain import grid_to_records
from ..io_backends.json_backend import write_records
from ..io_backends.router import guess_kind, make_backend
from .config import ConvertConfig

log = logging.getLogger("excel2json.pipeline")


@dataclass(frozen=True)
class ConversionResult:
    input_path: str
    sheet: str
    output_path: str
    column_count: int
    record_count: int


def run_conversion(cfg: ConvertConfig) -> ConversionResult:
    """
    Read -> convert -> write for a single sheet.

    Any ConversionError aborts the run before the output file is written.
    """
    kind = cfg.kind or guess_kind(cfg.input_path)
    backend = make_backend(kind)
    log.info("Reading %s[%s] (kind=%s)", cfg.input_path, cfg.sheet, kind)

    grid = backend.read_grid(cfg.input_path, cfg.sheet)
    conversion = grid_to_records(grid, cfg.columns)
    log.info(
        "Converted %d row(s) using %d column(s)",
        len(conversion.records),
        len(conversion.columns),
    )

    write_records(
        conversion.records,
        cfg.output_path,
        indent=cfg.indent,
        ensure_ascii=cfg.ensure_ascii,
    )
    log.info("Wrote %s", cfg.output_path)

    return ConversionResult(
        input_path=cfg.input_path,
        sheet=cfg.sheet,
        output_path=cfg.output_path,
        column_count=len(conversion.columns),
        record_count=len(conversion.records),
    )
