"""Logging setup shared by the SnipDeck CLI and library code.

Library modules only ever create module loggers; handlers are installed
once by the CLI through ``setup_logging``.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%H:%M:%S"

_ROOT_LOGGER_NAME = "snipdeck"


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Configure the ``snipdeck`` logger hierarchy.

    Verbose wins over quiet when both flags are given. Calling this more
    than once replaces the handler rather than stacking a new one.

    Args:
        verbose: Emit DEBUG records
        quiet: Only emit WARNING and above

    Returns:
        The configured package logger
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        if getattr(handler, "_snipdeck_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    handler._snipdeck_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name``; thin wrapper kept for CLI modules."""
    return logging.getLogger(name)
