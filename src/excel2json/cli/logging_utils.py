from __future__ import annotations
import logging


def verbosity_to_level(verbosity: int) -> int:
    """
    - 0  -> WARNING
    - 1  -> INFO
    - 2+ -> DEBUG
    """
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def setup_logging(verbosity: int) -> None:
    logging.basicConfig(
        level=verbosity_to_level(verbosity),
        format="%(levelname)s  %(name)s:%(message)s",
    )
