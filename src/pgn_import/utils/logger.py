"""Logger configuration and convenience helpers."""

from __future__ import annotations

import logging
import sys

_DEFAULT_LOGGER_NAME = "pgn_import"
_DEFAULT_LOG_LEVEL = logging.INFO
_DEFAULT_FORMATTER = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
_DEFAULT_HANDLER = logging.StreamHandler(sys.stdout)
_DEFAULT_HANDLER.setFormatter(_DEFAULT_FORMATTER)


def _configure_logger(logger: logging.Logger, level: int) -> None:
    """
    Configures the package logger with a level and the default handler.

    The level is only applied when none is set yet, the stdout handler is
    attached when the logger has no handlers, and propagation to the root
    logger is disabled so host applications do not see duplicate lines.

    Parameters
    ----------
    logger : logging.Logger
        The logger instance to configure.
    level : int
        The logging level to set if the logger's level is not already set.

    Examples
    --------
    >>> import logging
    >>> from pgn_import.utils.logger import _configure_logger
    >>> logger = logging.getLogger("pgn_import")
    >>> _configure_logger(logger, logging.INFO)
    >>> logger.info("Imported game")
    """
    if logger.level == logging.NOTSET:
        logger.setLevel(level)
    if not logger.handlers:
        logger.addHandler(_DEFAULT_HANDLER)
    logger.propagate = False


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the package logger.

    Module loggers (``pgn_import.*``) stay at NOTSET and inherit the level and
    handler of the configured package logger.
    """
    _configure_logger(logging.getLogger(_DEFAULT_LOGGER_NAME), _DEFAULT_LOG_LEVEL)
    return logging.getLogger(name or _DEFAULT_LOGGER_NAME)


def set_level(level: int | str, logger_names: list[str] | None = None) -> None:
    """Set the log level for one or more logger names."""
    names = logger_names or [_DEFAULT_LOGGER_NAME]
    for name in names:
        logging.getLogger(name).setLevel(level)
