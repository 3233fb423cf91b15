"""Logging setup for the mdansi command line.

The library itself only creates module loggers; handlers are installed here,
by the command line, and nowhere else. Everything goes to stderr so log
records never mix with rendered text on stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from mdansi.constants import LOG_FORMAT, TRACE_DATE_FORMAT, TRACE_LOG_FORMAT


def resolve_log_level(log_level: int | str) -> int:
    """Return the numeric level for a level number or name, INFO if unknown."""
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install the command line's handlers on the root logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Also append log records to this file.
    trace_mode : bool, default False
        Include timestamps and logger names, useful when tracing which part
        of the renderer reported a diagnostic.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    level = resolve_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if trace_mode:
        formatter = logging.Formatter(TRACE_LOG_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(LOG_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            print(f"Warning: could not open log file {log_file}: {exc}", file=sys.stderr)
            log_file = None

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if log_file:
        root_logger.info("Logging to file: %s", log_file)

    return root_logger
