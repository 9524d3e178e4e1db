"""Package logger factory."""

import logging
import os


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with a single stream handler attached.

    Defaults to WARNING. Override with the HALFMATRIX_LOG_LEVEL environment
    variable (e.g. HALFMATRIX_LOG_LEVEL=debug).
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    default_level = logging.WARNING
    level_name = os.getenv("HALFMATRIX_LOG_LEVEL", logging.getLevelName(default_level))
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        level = default_level

    logger.setLevel(level)
    return logger
