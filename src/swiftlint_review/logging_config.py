"""Logging configuration for swiftlint-review."""
import logging
import sys
from typing import TextIO

LOGGER_NAME = "swiftlint_review"

DEFAULT_FORMAT = "%(levelname)s: %(message)s"
VERBOSE_FORMAT = "%(levelname)s [%(name)s]: %(message)s"


def resolve_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map CLI verbosity flags to a logging level; quiet wins over verbose."""
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def setup_logging(verbose: bool = False, quiet: bool = False, stream: TextIO | None = None) -> None:
    """Configure the swiftlint_review logger.

    Verbose output names the emitting module, which helps when following
    a run file by file.

    Args:
        verbose: Log shell invocations and file lists (DEBUG)
        quiet: Only log errors
        stream: Where to write; stderr by default, since stdout carries
            workflow commands and JSON reports
    """
    level = resolve_level(verbose, quiet)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(VERBOSE_FORMAT if verbose else DEFAULT_FORMAT))

    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the swiftlint_review namespace.

    Args:
        name: Module name, usually ``__name__``

    Returns:
        Logger instance
    """
    if name != LOGGER_NAME and not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
