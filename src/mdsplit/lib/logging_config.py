"""Logging setup for mdsplit.

All package loggers live under the ``mdsplit`` namespace so a host
application can tune them with a single ``logging.getLogger("mdsplit")``.
"""

import logging
import sys

PACKAGE_LOGGER = "mdsplit"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package logger.

    Args:
        name: Module name, usually ``__name__``.

    Returns:
        Logger for ``name`` (prefixed with ``mdsplit.`` when outside the
        package namespace).
    """
    if name != PACKAGE_LOGGER and not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Configure the package logger with a single stderr handler.

    Calling it again replaces the previous handler instead of stacking them.

    Args:
        verbose: Log at DEBUG level.
        quiet: Only log errors. Takes precedence over ``verbose``.

    Returns:
        The configured package logger.
    """
    global _handler

    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(level)
    return logger
