#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdansi/utils/wrap.py
"""Width-aware text wrapping with line prefixes.

This module reflows (possibly ANSI-styled) text to a column width and
decorates every resulting line with a prefix. Prefixes come in three forms:

- no prefix (``NO_PREFIX``)
- fixed: the same marker on every line, e.g. block quote bars
- hanging: a marker on the first line and blank padding of the same display
  width on the others, e.g. list bullets

Prefixes compose: a quote inside a list item is the list's hanging prefix
extended by the quote's fixed marker. Once the first line of a container has
been emitted, ``continuation()`` turns the prefix into its padding form so
the marker is not repeated.

All widths are display widths: escape sequences are zero columns wide and
wide characters take two columns.

Examples
--------
    >>> print(wrap_and_prefix("one two three", 9, LinePrefix.hanging("* ")))
    * one two
      three

"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from mdansi.constants import DEFAULT_TAB_SIZE
from mdansi.utils.ansi import carry_styles, display_width

_CHUNK_RE = re.compile(r"([ \t\r\x0b\x0c]+)")
_TAB_RE = re.compile(r"(\t)")


@dataclass(frozen=True)
class LinePrefix:
    """Prefix applied to wrapped lines.

    Parameters
    ----------
    first : str, default ""
        Prefix of the first line
    rest : str, default ""
        Prefix of every following line

    """

    first: str = ""
    rest: str = ""

    @classmethod
    def fixed(cls, marker: str) -> LinePrefix:
        """Create a prefix repeating ``marker`` on every line."""
        return cls(marker, marker)

    @classmethod
    def hanging(cls, marker: str) -> LinePrefix:
        """Create a hanging prefix: ``marker`` first, matching blank padding after."""
        return cls(marker, " " * display_width(marker))

    @property
    def is_empty(self) -> bool:
        return not self.first and not self.rest

    @property
    def width(self) -> int:
        """Display width reserved for the prefix on every line."""
        return max(display_width(self.first), display_width(self.rest))

    def extend(self, inner: LinePrefix) -> LinePrefix:
        """Compose this (outer) prefix with an inner one."""
        return LinePrefix(self.first + inner.first, self.rest + inner.rest)

    def continuation(self) -> LinePrefix:
        """Return the prefix to use once the first line has been emitted."""
        return LinePrefix(self.rest, self.rest)

    def blank_line(self) -> str:
        """Return the separator line carried between blocks under this prefix.

        Padding-only prefixes produce an empty line rather than trailing spaces.
        """
        return self.rest if self.rest.strip() else ""

    def apply(self, lines: Iterable[str]) -> list[str]:
        """Prefix ``lines``: the first gets ``first``, the rest get ``rest``.

        Styles left open at a line end are closed there and re-opened after
        the next line's prefix, so markers are never drawn styled.
        """
        if self.is_empty:
            return list(lines)
        result = []
        for index, line in enumerate(carry_styles(lines)):
            result.append((self.first if index == 0 else self.rest) + line)
        return result


NO_PREFIX = LinePrefix()


def wrap_and_prefix(text: str, width: int | None, prefix: LinePrefix = NO_PREFIX) -> str:
    """Reflow ``text`` to ``width`` columns and apply ``prefix``.

    Parameters
    ----------
    text : str
        Text to wrap. May contain ANSI escape sequences and hard line breaks.
    width : int or None
        Total line width including the prefix. None disables reflowing.
    prefix : LinePrefix, default NO_PREFIX
        Prefix policy for the output lines

    Returns
    -------
    str
        The wrapped, prefixed text with exactly one trailing newline removed

    Notes
    -----
    With ``width=None`` and no prefix the text is returned unchanged. With
    ``width=None`` and a prefix, lines are prefixed but never reflowed.

    The body is wrapped to ``width - prefix.width`` columns, clamped to a
    minimum of one column. Words longer than the available width are kept
    whole on their own line.

    """
    if width is None:
        if prefix.is_empty:
            return text
        return "\n".join(prefix.apply(_trim_newline(text).split("\n")))

    available = max(1, width - prefix.width)
    lines: list[str] = []
    for hard_line in _trim_newline(text).split("\n"):
        lines.extend(fill_line(expand_tabs(hard_line), available))

    return "\n".join(prefix.apply(lines))


def fill_line(line: str, width: int) -> list[str]:
    """Greedily fill one hard line into lines of at most ``width`` columns.

    Whitespace at the start of continuation lines and at the end of every
    line is dropped; zero-width escape sequences stay attached to the line
    they were emitted on.
    """
    chunks = [chunk for chunk in _CHUNK_RE.split(line) if chunk]
    lines: list[str] = []
    current: list[str] = []
    current_width = 0

    for chunk in chunks:
        chunk_width = display_width(chunk)

        if _CHUNK_RE.fullmatch(chunk):
            if current_width == 0 and (lines or chunk_width > width):
                continue
            if current_width + chunk_width <= width:
                current.append(chunk)
                current_width += chunk_width
            else:
                lines.append(_finish_line(current))
                current, current_width = [], 0
            continue

        if current_width + chunk_width > width and current_width > 0:
            lines.append(_finish_line(current))
            current, current_width = [], 0

        current.append(chunk)
        current_width += chunk_width

    if current or not lines:
        lines.append(_finish_line(current))

    return lines


def expand_tabs(line: str, tab_size: int = DEFAULT_TAB_SIZE) -> str:
    """Replace tabs with spaces up to the next tab stop, counting display columns."""
    if "\t" not in line:
        return line
    parts = []
    column = 0
    for piece in _TAB_RE.split(line):
        if piece == "\t":
            padding = tab_size - column % tab_size
            parts.append(" " * padding)
            column += padding
        else:
            parts.append(piece)
            column += display_width(piece)
    return "".join(parts)


def _finish_line(chunks: list[str]) -> str:
    # drop trailing whitespace but keep trailing escape sequences
    tail: list[str] = []
    while chunks and (_CHUNK_RE.fullmatch(chunks[-1]) or display_width(chunks[-1]) == 0):
        chunk = chunks.pop()
        if not _CHUNK_RE.fullmatch(chunk):
            tail.insert(0, chunk)
    return "".join(chunks + tail)


def _trim_newline(text: str) -> str:
    return text[:-1] if text.endswith("\n") else text
