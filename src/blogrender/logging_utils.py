#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blogrender/logging_utils.py
"""Logging setup for the ``blogrender`` command.

Library modules only call ``logging.getLogger(__name__)``. Handlers are
installed here, by the command-line entry point, so that applications
embedding :class:`blogrender.Renderer` keep their own logging setup.

"""

from __future__ import annotations

import logging
import sys
from typing import Optional

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(log_level: int | str) -> int:
    """Map a level name such as ``"debug"`` to its number; unknown names give INFO."""
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Replace the root logger's handlers with a stderr handler and an optional file.

    Parameters
    ----------
    log_level : int | str
        Numeric level or level name
    log_file : str, optional
        Also append records to this file. A file that cannot be opened is
        reported as a warning and console logging continues.
    trace_mode : bool, default False
        Include timestamps and logger names in every record

    Returns
    -------
    logging.Logger
        The root logger

    """
    level = resolve_level(log_level)
    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(CONSOLE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: Optional[OSError] = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as e:
            file_error = e

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    if file_error is not None:
        root.warning("Could not open log file %s: %s", log_file, file_error)
    elif log_file:
        root.info("Logging to file: %s", log_file)
    return root
