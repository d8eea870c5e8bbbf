from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Stable identifiers for every way a conversion can fail."""

    FILE_OPEN = "file_open"
    SHEET_NOT_FOUND = "sheet_not_found"
    EMPTY_SHEET = "empty_sheet"
    INVALID_SELECTOR = "invalid_selector"
    SELECTOR_OUT_OF_RANGE = "selector_out_of_range"
    SERIALIZATION = "serialization"
    OUTPUT_WRITE = "output_write"


class ConversionError(Exception):
    """
    Base class for all conversion failures.

    - kind:    ErrorKind tag, lets callers branch without isinstance chains
    - context: the offending input (path, sheet, token, position, ...)
    """

    kind: ErrorKind

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = dict(context or {})


class FileOpenError(ConversionError):
    kind = ErrorKind.FILE_OPEN


class SheetNotFoundError(ConversionError):
    kind = ErrorKind.SHEET_NOT_FOUND


class EmptySheetError(ConversionError):
    kind = ErrorKind.EMPTY_SHEET


class InvalidSelectorError(ConversionError):
    kind = ErrorKind.INVALID_SELECTOR


class SelectorOutOfRangeError(ConversionError):
    kind = ErrorKind.SELECTOR_OUT_OF_RANGE


class SerializationError(ConversionError):
    kind = ErrorKind.SERIALIZATION


class OutputWriteError(ConversionError):
    kind = ErrorKind.OUTPUT_WRITE
