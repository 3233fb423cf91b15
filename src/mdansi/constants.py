#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the mdansi library.

This module centralizes the hardcoded values used across mdansi so that the
options dataclasses, the renderer and the command line share one source of
truth.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. ANSI Escape Sequences - Reset and style on/off pairs
3. Terminal Rendering Defaults - Markers, rule and recursion limits
4. Code Highlighting Defaults - Lexer and theme selection
5. Command Line Exit Codes
6. Logging - Message formats for the command line
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

HighlightMode = Literal["inline", "block"]
DiagnosticKind = Literal["unsupported", "depth"]

# =============================================================================
# ANSI Escape Sequences
# =============================================================================

ANSI_RESET = "\x1b[0m"
ANSI_DEFAULT_FOREGROUND = "\x1b[39m"

# Select Graphic Rendition codes as (on, off) pairs
SGR_BOLD = ("1", "22")
SGR_ITALIC = ("3", "23")
SGR_UNDERLINE = ("4", "24")

# Matches CSI sequences (colors, styles) so they can be excluded from width math
ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")

# SGR sequences only; group 1 holds the parameter list
SGR_RE = re.compile(r"\x1b\[([0-9;]*)m")

# =============================================================================
# Terminal Rendering Defaults
# =============================================================================

DEFAULT_TERMINAL_WIDTH: int | None = None
DEFAULT_STYLED = True
DEFAULT_QUOTE_MARKER = "> "
DEFAULT_LIST_MARKER = "* "
DEFAULT_NUMBER_ORDERED_LISTS = False
DEFAULT_HEADING_MARKERS = False
DEFAULT_RULE_CHAR = "─"
DEFAULT_RULE_FALLBACK_WIDTH = 80
DEFAULT_MAX_DEPTH = 64
DEFAULT_IMAGE_LABEL = "Image"
DEFAULT_TAB_SIZE = 8

# =============================================================================
# Code Highlighting Defaults
# =============================================================================

# One lexer is selected for the whole run; fence language tags are not honoured
DEFAULT_CODE_LANGUAGE = "rust"
DEFAULT_CODE_THEME = "monokai"
DEFAULT_CODE_BACKGROUND = False

# =============================================================================
# Command Line Exit Codes
# =============================================================================

EXIT_SUCCESS = 0
EXIT_INPUT_ERROR = 1
EXIT_RENDERING_ERROR = 2

# =============================================================================
# Logging
# =============================================================================

LOG_FORMAT = "%(levelname)s: %(message)s"
TRACE_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
