#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdansi/highlight.py
"""Syntax highlighting of code for the terminal.

The highlighter is an adapter over Pygments: the lexer and style are resolved
once when the highlighter is constructed and reused, read-only, for every
call. Output carries a 24-bit foreground escape (and optionally a background
escape) in front of every token and exactly one reset at the very end.

The ``language`` argument of :meth:`CodeHighlighter.highlight` is accepted so
all highlighters share one interface, but it is ignored: every code span and
fenced block is highlighted with the lexer chosen at startup, whatever its
fence tag says. This is a known fidelity limitation of the renderer.

Examples
--------
    >>> highlighter = CodeHighlighter(language="python", theme="monokai")
    >>> escaped = highlighter.highlight("x = 1", mode="inline")
    >>> escaped.endswith("\\x1b[0m")
    True

"""

from __future__ import annotations

import logging
import re
from typing import Optional, Protocol

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.style import StyleMeta
from pygments.styles import get_style_by_name
from pygments.token import _TokenType
from pygments.util import ClassNotFound

from mdansi.constants import (
    ANSI_DEFAULT_FOREGROUND,
    ANSI_RESET,
    DEFAULT_CODE_BACKGROUND,
    DEFAULT_CODE_LANGUAGE,
    DEFAULT_CODE_THEME,
    HighlightMode,
)
from mdansi.exceptions import ValidationError

_HEX_COLOR_RE = re.compile(r"[0-9a-fA-F]{6}")

logger = logging.getLogger(__name__)


class Highlighter(Protocol):
    """Interface of every code highlighter used by the terminal renderer."""

    def highlight(self, code: str, language: Optional[str] = None, mode: HighlightMode = "inline") -> str:
        """Return ``code`` decorated for the terminal."""
        ...


class PlainHighlighter:
    """Highlighter that returns code unchanged, used when styling is off."""

    def highlight(self, code: str, language: Optional[str] = None, mode: HighlightMode = "inline") -> str:
        return code


class CodeHighlighter:
    """Highlight code with a fixed Pygments lexer and style.

    Parameters
    ----------
    language : str, default "rust"
        Pygments lexer name or alias
    theme : str, default "monokai"
        Pygments style name
    background : bool, default False
        Whether to emit the style's background colors as well

    Raises
    ------
    ValidationError
        If the lexer or style cannot be found

    """

    def __init__(
        self,
        language: str = DEFAULT_CODE_LANGUAGE,
        theme: str = DEFAULT_CODE_THEME,
        background: bool = DEFAULT_CODE_BACKGROUND,
    ):
        """Resolve the lexer and style once."""
        self.lexer = _load_lexer(language)
        self.style = _load_style(theme)
        self.background = background
        logger.debug("Highlighting code with lexer %s and style %s", self.lexer.name, theme)

    def highlight(self, code: str, language: Optional[str] = None, mode: HighlightMode = "inline") -> str:
        """Return ``code`` with per-token color escapes and one trailing reset.

        Parameters
        ----------
        code : str
            Source code to highlight
        language : str or None, default None
            Declared language of the code. Ignored; see the module notes.
        mode : {"inline", "block"}, default "inline"
            ``inline`` treats the code as one logical line. ``block`` keeps
            every line terminator of the input.

        Returns
        -------
        str
            Escaped code followed by a single reset

        """
        if mode == "inline":
            code = " ".join(code.splitlines())

        parts = []
        for token_type, value in self.lexer.get_tokens(code):
            if not value:
                continue
            # a newline never carries color of its own
            if value == "\n":
                parts.append(value)
                continue
            parts.append(self._escape_for(token_type))
            parts.append(value)

        parts.append(ANSI_RESET)
        return "".join(parts)

    def _escape_for(self, token_type: _TokenType) -> str:
        token_style = self.style.style_for_token(token_type)
        escape = _truecolor(token_style.get("color"), 38) or ANSI_DEFAULT_FOREGROUND
        if self.background:
            escape += _truecolor(token_style.get("bgcolor"), 48)
        return escape


def _load_lexer(language: str) -> Lexer:
    # keep the input byte for byte: no trailing newline added, nothing stripped
    try:
        return get_lexer_by_name(language, stripnl=False, stripall=False, ensurenl=False)
    except ClassNotFound as exc:
        raise ValidationError(
            f"Unknown code language: {language}", parameter_name="code_language", parameter_value=language
        ) from exc


def _load_style(theme: str) -> StyleMeta:
    try:
        return get_style_by_name(theme)
    except ClassNotFound as exc:
        raise ValidationError(
            f"Unknown code theme: {theme}", parameter_name="code_theme", parameter_value=theme
        ) from exc


def _truecolor(hex_color: Optional[str], selector: int) -> str:
    # styles may also name ANSI palette colors, which have no 24-bit form
    value = (hex_color or "").lstrip("#")
    if not _HEX_COLOR_RE.fullmatch(value):
        return ""
    red, green, blue = int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)
    return f"\x1b[{selector};2;{red};{green};{blue}m"
