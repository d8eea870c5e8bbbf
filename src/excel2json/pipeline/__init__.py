from .config import ConvertConfig, build_config, load_config_file
from .runner import ConversionResult, run_conversion

__all__ = [
    "ConversionResult",
    "ConvertConfig",
    "build_config",
    "load_config_file",
    "run_conversion",
]
