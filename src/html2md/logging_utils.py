"""Logging setup for the html2md command.

Library modules only create module loggers under the ``html2md`` namespace.
The command line installs handlers on that namespace logger, so a program that
imports html2md keeps control of its own root logger configuration.

A level of DEBUG switches to the trace format, which adds timestamps and
logger names so the parse, prune and render steps can be told apart.
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from __future__ import annotations

import logging
import sys

from html2md.constants import DEFAULT_LOG_LEVEL

PACKAGE_LOGGER = "html2md"

CONSOLE_FORMAT = "html2md: %(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Set on handlers installed here so a second call replaces only those
_OWNED_HANDLER_ATTR = "_html2md_handler"


def resolve_log_level(level: int | str) -> int:
    """Turn a level name such as ``"info"`` or a numeric level into an int.

    Raises
    ------
    ValueError
        If ``level`` names no logging level

    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def _own(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    setattr(handler, _OWNED_HANDLER_ATTR, True)
    return handler


def configure_logging(
    log_level: int | str = DEFAULT_LOG_LEVEL,
    log_file: str | None = None,
    trace_mode: bool | None = None,
) -> logging.Logger:
    """Send html2md log records to stderr and, optionally, a file.

    Parameters
    ----------
    log_level : int | str, default "WARNING"
        Numeric level or level name, case-insensitive
    log_file : str, optional
        File that also receives every record, opened for appending
    trace_mode : bool, optional
        Use the timestamped trace format. Defaults to on for DEBUG and below.

    Returns
    -------
    logging.Logger
        The ``html2md`` namespace logger

    Raises
    ------
    ValueError
        If ``log_level`` is not a known level name

    """
    level = resolve_log_level(log_level)
    if trace_mode is None:
        trace_mode = level <= logging.DEBUG

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in [h for h in logger.handlers if getattr(h, _OWNED_HANDLER_ATTR, False)]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)
    logger.propagate = False

    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(CONSOLE_FORMAT)

    logger.addHandler(_own(logging.StreamHandler(sys.stderr), level, formatter))

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            logger.addHandler(_own(file_handler, level, formatter))
            logger.debug("Logging to file: %s", log_file)

    return logger
