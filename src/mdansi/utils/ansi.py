#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdansi/utils/ansi.py
"""ANSI style scopes and display-width helpers.

Styles are modelled as on/off pairs of SGR codes. Nested inline formatting is
tracked as an immutable stack (a tuple of :class:`AnsiStyle`), innermost last.
Closing a scope emits only that scope's own "off" code; because an off code
such as ``22`` cancels every bold scope at once, the outer scopes sharing that
code are re-opened right after it. A global reset is never used to close a
scope.

Functions
---------
strip_ansi : Remove escape sequences from a string
display_width : Terminal columns occupied by a string
open_scope : Push a style onto a stack and return its opening sequence
close_scope : Emit the closing sequence for the innermost style
reopen_scopes : Re-emit the opening sequences of a whole stack
carry_styles : Close attributes at line ends and re-open them on the next line

Examples
--------
    >>> stack, opening = open_scope((), BOLD)
    >>> opening + "bold" + close_scope(stack)
    '\\x1b[1mbold\\x1b[22m'

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from rich.cells import cell_len

from mdansi.constants import ANSI_ESCAPE_RE, SGR_BOLD, SGR_ITALIC, SGR_RE, SGR_UNDERLINE


@dataclass(frozen=True)
class AnsiStyle:
    """A single text attribute with its SGR on/off codes.

    Parameters
    ----------
    name : str
        Human-readable name of the style
    on_code : str
        SGR parameter enabling the attribute
    off_code : str
        SGR parameter disabling the attribute

    """

    name: str
    on_code: str
    off_code: str

    @property
    def prefix(self) -> str:
        """Escape sequence that opens the style."""
        return f"\x1b[{self.on_code}m"

    @property
    def suffix(self) -> str:
        """Escape sequence that closes the style."""
        return f"\x1b[{self.off_code}m"


BOLD = AnsiStyle("bold", *SGR_BOLD)
ITALIC = AnsiStyle("italic", *SGR_ITALIC)
UNDERLINE = AnsiStyle("underline", *SGR_UNDERLINE)

StyleStack = Tuple[AnsiStyle, ...]


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from ``text``."""
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies.

    Escape sequences count as zero columns; East Asian wide characters count
    as two.
    """
    return cell_len(strip_ansi(text))


def open_scope(stack: StyleStack, style: AnsiStyle) -> tuple[StyleStack, str]:
    """Push ``style`` onto ``stack``.

    Returns
    -------
    tuple
        The new stack and the escape sequence opening the style

    """
    return stack + (style,), style.prefix


def close_scope(stack: StyleStack) -> str:
    """Return the sequence closing the innermost style of ``stack``.

    Outer scopes whose attribute is cancelled by the same off code are
    re-opened so they keep applying after the inner scope ends.
    """
    if not stack:
        return ""
    inner, outer = stack[-1], stack[:-1]
    reopened = "".join(style.prefix for style in outer if style.off_code == inner.off_code)
    return inner.suffix + reopened


def reopen_scopes(stack: StyleStack) -> str:
    """Return the sequence re-opening every style in ``stack``, outermost first."""
    return "".join(style.prefix for style in stack)


# attribute slot -> sequence switching it off
_SLOT_OFF = {
    "intensity": "\x1b[22m",
    "italic": "\x1b[23m",
    "underline": "\x1b[24m",
    "foreground": "\x1b[39m",
    "background": "\x1b[49m",
}
_OFF_CODES = {22: "intensity", 23: "italic", 24: "underline", 39: "foreground", 49: "background"}


def _slot_for(code: int) -> str | None:
    if code in (1, 2):
        return "intensity"
    if code == 3:
        return "italic"
    if code == 4:
        return "underline"
    if 30 <= code <= 37 or 90 <= code <= 97:
        return "foreground"
    if 40 <= code <= 47 or 100 <= code <= 107:
        return "background"
    return None


def track_sgr(text: str, state: dict[str, str]) -> dict[str, str]:
    """Return the attributes left open after writing ``text``.

    ``state`` maps an attribute slot (intensity, italic, underline, foreground,
    background) to the sequence that switched it on. Resets clear every slot
    and off codes clear their own.
    """
    state = dict(state)
    for match in SGR_RE.finditer(text):
        params = match.group(1).split(";")
        index = 0
        while index < len(params):
            code = int(params[index] or 0)
            index += 1
            if code == 0:
                state.clear()
            elif code in _OFF_CODES:
                state.pop(_OFF_CODES[code], None)
            elif code in (38, 48):
                # extended color: 5;n or 2;r;g;b
                count = 2 if index < len(params) and params[index] == "5" else 4
                color = params[index : index + count]
                index += count
                state["foreground" if code == 38 else "background"] = f"\x1b[{';'.join([str(code)] + color)}m"
            else:
                slot = _slot_for(code)
                if slot is not None:
                    state[slot] = f"\x1b[{code}m"
    return state


def carry_styles(lines: Iterable[str]) -> list[str]:
    """Keep every line's attributes to itself.

    Attributes still open at the end of a line are switched off with their own
    off codes and switched on again at the start of the next non-empty line,
    so whatever is written between the lines (a quote marker, list padding)
    is drawn unstyled. No reset is added.
    """
    result = []
    state: dict[str, str] = {}
    for line in lines:
        if not line:
            result.append(line)
            continue
        opening = "".join(state.values())
        state = track_sgr(line, state)
        closing = "".join(_SLOT_OFF[slot] for slot in state)
        result.append(opening + line + closing)
    return result
