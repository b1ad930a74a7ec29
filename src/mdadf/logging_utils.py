#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdadf/logging_utils.py
"""Logging setup for the mdadf command line.

Library modules only create ``logging.getLogger(__name__)`` loggers and never
install handlers. ``configure_logging`` attaches handlers to the ``mdadf``
package logger, so a host application that calls ``mdadf.cli.main`` keeps its
own root handlers untouched. Records from ``mdadf.*`` are not propagated to
the root logger while the CLI handlers are installed; ``reset_logging``
removes them again.

"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "mdadf"

LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_HANDLER_NAME = "mdadf-cli"

_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_PLAIN_FORMAT = "mdadf: %(levelname)s: %(message)s"


def resolve_log_level(log_level: int | str) -> int:
    """Turn a level name or number into a numeric logging level.

    Parameters
    ----------
    log_level : int or str
        Numeric level or one of ``LOG_LEVEL_NAMES`` (case-insensitive)

    Returns
    -------
    int
        Numeric logging level

    Raises
    ------
    ValueError
        If a name is not a known level

    """
    if isinstance(log_level, int):
        return log_level
    name = str(log_level).strip().upper()
    if name not in LOG_LEVEL_NAMES:
        raise ValueError(f"Unknown log level {log_level!r}; expected one of {', '.join(LOG_LEVEL_NAMES)}")
    return logging.getLevelName(name)


def reset_logging() -> logging.Logger:
    """Remove the handlers installed by ``configure_logging``."""
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in [h for h in package_logger.handlers if h.get_name() == _HANDLER_NAME]:
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    return package_logger


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Send ``mdadf`` log records to stderr and optionally to a file.

    Calling it again replaces the handlers from the previous call.

    Parameters
    ----------
    log_level : int or str
        Numeric logging level or level name (e.g., "INFO")
    log_file : str, optional
        Also append log records to this file
    trace_mode : bool, default False
        Include timestamps and logger names in every record

    Returns
    -------
    logging.Logger
        The configured ``mdadf`` package logger

    Raises
    ------
    ValueError
        If ``log_level`` is not a known level name

    """
    level = resolve_log_level(log_level)
    package_logger = reset_logging()

    if trace_mode:
        formatter = logging.Formatter(_TRACE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    else:
        formatter = logging.Formatter(_PLAIN_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: OSError | None = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            file_error = exc

    for handler in handlers:
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    package_logger.setLevel(level)
    package_logger.propagate = False

    if file_error is not None:
        package_logger.warning("Could not open log file %s: %s", log_file, file_error)
    elif log_file:
        package_logger.debug("Logging to file: %s", log_file)

    return package_logger
