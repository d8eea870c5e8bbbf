from .domain import grid_to_records, normalize_header
from .errors import ConversionError, ErrorKind
from .pipeline import ConvertConfig, run_conversion

__all__ = [
    "ConversionError",
    "ConvertConfig",
    "ErrorKind",
    "grid_to_records",
    "normalize_header",
    "run_conversion",
]

__version__ = "0.1.0"
