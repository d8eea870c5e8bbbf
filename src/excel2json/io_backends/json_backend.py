from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Sequence

from ..domain.records import Record
from ..errors import OutputWriteError, SerializationError

log = logging.getLogger("excel2json.io.json")


def write_records(
    records: Sequence[Record],
    path: str,
    *,
    indent: int = 2,
    ensure_ascii: bool = False,
) -> None:
    """
    Write records as one pretty-printed JSON array (UTF-8).

    The document is serialized in full, written to a temp file next to the
    target and then moved into place. Either the complete array ends up at
    `path` or the previous content (if any) is left untouched.
    """
    out = Path(path)
    try:
        text = json.dumps(list(records), ensure_ascii=ensure_ascii, indent=indent)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Failed to serialize JSON: {e}", context={"path": str(out)}) from e

    tmp_name = None
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=out.parent, prefix=f".{out.name}.", suffix=".tmp", delete=False
        ) as f:
            tmp_name = f.name
            f.write(text)
        os.replace(tmp_name, out)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise OutputWriteError(
            f"Failed to write output file: {out} ({e})", context={"path": str(out)}
        ) from e

    log.debug("wrote %d record(s) to %s", len(records), out)
