from __future__ import annotations

import argparse
import logging
from typing import Any, Dict, Optional

from excel2json.cli.logging_utils import setup_logging
from excel2json.cli.runtime import run_cli
from excel2json.io_backends.router import available_kinds
from excel2json.pipeline import build_config, load_config_file, run_conversion

log = logging.getLogger("excel2json.cli")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="excel2json",
        description="Convert Excel files to JSON format",
    )
    parser.add_argument("file", help="Input Excel file path (.xlsx), or a directory of <sheet>.csv files")
    parser.add_argument("sheet", help="Sheet name to convert")
    parser.add_argument(
        "-c",
        "--columns",
        help=(
            "Visible column numbers to include (comma-separated, e.g., 1,2,3). "
            "Only counts columns with non-empty headers. "
            "If not specified, all visible columns are included"
        ),
    )
    parser.add_argument("-o", "--output", required=True, help="Output JSON file path")

    # source / output tuning
    parser.add_argument("--kind", choices=available_kinds(), help="Input kind (default: guessed from path)")
    parser.add_argument("--indent", type=int, help="JSON indentation (default 2)")
    parser.add_argument(
        "--ascii", dest="ensure_ascii", action="store_true", default=None,
        help="Escape non-ASCII characters in the output",
    )
    parser.add_argument("--config", help="Path to a config YAML (kind, columns, indent, ensure_ascii, sheets)")

    # logging options
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase verbosity (repeatable)")
    parser.add_argument("--debug", action="store_true", help="Show full tracebacks on errors")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    setup_logging(args.verbose)

    file_values: Dict[str, Any] = load_config_file(args.config) if args.config else {}
    cfg = build_config(
        file_values,
        input_path=args.file,
        sheet=args.sheet,
        output_path=args.output,
        columns=args.columns,
        kind=args.kind,
        indent=args.indent,
        ensure_ascii=args.ensure_ascii,
    )
    log.debug("config: %s", cfg)

    result = run_conversion(cfg)

    print("Successfully converted Excel to JSON")
    print(f"Input: {result.input_path}")
    print(f"Sheet: {result.sheet}")
    print(f"Output: {result.output_path}")
    print(f"Visible columns: {result.column_count}")
    print(f"Total records: {result.record_count}")
    return 0


def cli() -> None:
    run_cli(main)


if __name__ == "__main__":
    cli()
