#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdansi/utils/terminal.py
"""Terminal capability helpers used at startup.

These functions are called once by the command line before rendering and
their results are handed to the renderer as plain option values; the renderer
itself never probes the terminal.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
from typing import IO, Any, Mapping, Optional

logger = logging.getLogger(__name__)

_ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004
_STD_OUTPUT_HANDLE = -11


def color_disabled_by_env(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Return True when ``NO_COLOR`` is set or the terminal is ``dumb``."""
    env = os.environ if environ is None else environ
    return "NO_COLOR" in env or env.get("TERM") == "dumb"


def enable_ansi_support() -> bool:
    """Enable ANSI escape processing for standard output.

    POSIX terminals interpret escapes natively. On Windows the console is
    switched to virtual terminal mode.

    Returns
    -------
    bool
        True if escape sequences will be interpreted, False if output should
        stay unstyled

    """
    if color_disabled_by_env():
        return False

    if sys.platform != "win32":
        return True

    try:
        import ctypes
        from ctypes import wintypes

        kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
        handle = kernel32.GetStdHandle(_STD_OUTPUT_HANDLE)
        mode = wintypes.DWORD()
        if not kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
            return False
        return bool(kernel32.SetConsoleMode(handle, mode.value | _ENABLE_VIRTUAL_TERMINAL_PROCESSING))
    except (AttributeError, OSError) as exc:
        logger.debug("Could not enable virtual terminal processing: %s", exc)
        return False


def detect_terminal_width(stream: IO[Any] | None = None) -> int | None:
    """Return the column count of ``stream`` if it is an interactive terminal.

    Parameters
    ----------
    stream : file-like, optional
        Stream to probe; defaults to ``sys.stdout``

    Returns
    -------
    int or None
        Terminal columns, or None when the stream is not a TTY (piped or
        redirected output is never wrapped)

    """
    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    if not callable(isatty):
        return None
    try:
        if not isatty():
            return None
    except (OSError, ValueError):
        return None

    columns = shutil.get_terminal_size(fallback=(80, 24)).columns
    return columns if columns > 0 else None
