"""Logging configuration for swagger-bolt.

Usage in modules:
    from swagger_bolt.log import get_logger
    logger = get_logger(__name__)

The root logger name is "swagger_bolt". Levels are controlled by the CLI.
"""

import logging
import sys

_LOGGER_NAME = "swagger_bolt"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a child logger under the swagger_bolt hierarchy.

    "swagger_bolt.synth.schema" -> "swagger_bolt.schema"
    """
    if name is None or name == _LOGGER_NAME:
        return logging.getLogger(_LOGGER_NAME)
    short = name.rsplit(".", 1)[-1]
    return logging.getLogger(f"{_LOGGER_NAME}.{short}")


def configure_logging(verbose: bool = False, quiet: bool = False, level: str | None = None) -> None:
    """Configure the swagger_bolt logger hierarchy.

    Levels:
        --verbose / -v  -> DEBUG
        (default)       -> INFO, or ``level`` when given
        --quiet / -q    -> WARNING
    """
    if verbose:
        resolved = logging.DEBUG
    elif quiet:
        resolved = logging.WARNING
    elif level:
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            resolved = logging.INFO
    else:
        resolved = logging.INFO

    root_logger = logging.getLogger(_LOGGER_NAME)
    root_logger.setLevel(resolved)

    if root_logger.handlers:
        for handler in root_logger.handlers:
            handler.setLevel(resolved)
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root_logger.addHandler(handler)
    root_logger.propagate = False
