#  Copyright (c) 2025 Tom Villani, Ph.D.
# mdansi/options/terminal.py
"""Configuration options for terminal rendering.

This module defines options for rendering the AST as ANSI-styled terminal text.
"""

from dataclasses import dataclass, field

from rich.cells import cell_len

from mdansi.constants import (
    DEFAULT_CODE_BACKGROUND,
    DEFAULT_CODE_LANGUAGE,
    DEFAULT_CODE_THEME,
    DEFAULT_HEADING_MARKERS,
    DEFAULT_LIST_MARKER,
    DEFAULT_MAX_DEPTH,
    DEFAULT_NUMBER_ORDERED_LISTS,
    DEFAULT_QUOTE_MARKER,
    DEFAULT_RULE_CHAR,
    DEFAULT_RULE_FALLBACK_WIDTH,
    DEFAULT_STYLED,
    DEFAULT_TERMINAL_WIDTH,
)
from mdansi.options.base import BaseRendererOptions


@dataclass(frozen=True)
class TerminalOptions(BaseRendererOptions):
    """Configuration options for terminal rendering.

    Parameters
    ----------
    width : int or None, default None
        Target column width. None means the output is not going to an
        interactive terminal: nothing is reflowed and rules use
        ``rule_fallback_width``.
    styled : bool, default True
        Emit ANSI escape sequences. When False, style scopes render as empty
        strings and code is not highlighted.
    quote_marker : str, default "> "
        Prefix added to every line of a block quote. Nested quotes
        concatenate their markers.
    list_marker : str, default "* "
        Marker for list items (both ordered and unordered lists unless
        ``number_ordered_lists`` is set).
    number_ordered_lists : bool, default False
        Render ordered list items as ``"{n}. "`` counting from the list start.
    heading_markers : bool, default False
        Prefix headings with ``#`` characters matching their level.
    rule_char : str, default "─"
        Character repeated to draw a horizontal rule.
    rule_fallback_width : int, default 80
        Rule length used when the width is unknown.
    max_depth : int, default 64
        Maximum nesting depth of blocks, and of spans within a block. Deeper
        blocks are skipped, deeper spans are flattened to plain text; both are
        reported.
    code_language : str, default "rust"
        Pygments lexer name used for every code span and code block.
    code_theme : str, default "monokai"
        Pygments style name providing token colors.
    code_background : bool, default False
        Also emit the theme's token background colors.

    Examples
    --------
    Render for an 80 column terminal with numbered ordered lists:
        >>> from mdansi.ast import Document, Paragraph, Text
        >>> from mdansi.renderers.terminal import TerminalRenderer
        >>> options = TerminalOptions(width=80, number_ordered_lists=True)
        >>> renderer = TerminalRenderer(options)

    """

    width: int | None = field(
        default=DEFAULT_TERMINAL_WIDTH,
        metadata={"help": "Target column width (None = no wrapping)"},
    )
    styled: bool = field(
        default=DEFAULT_STYLED,
        metadata={"help": "Emit ANSI styles and syntax colors"},
    )
    quote_marker: str = field(
        default=DEFAULT_QUOTE_MARKER,
        metadata={"help": "Prefix for block quote lines"},
    )
    list_marker: str = field(
        default=DEFAULT_LIST_MARKER,
        metadata={"help": "Marker for list items"},
    )
    number_ordered_lists: bool = field(
        default=DEFAULT_NUMBER_ORDERED_LISTS,
        metadata={"help": "Render numerals for ordered list items"},
    )
    heading_markers: bool = field(
        default=DEFAULT_HEADING_MARKERS,
        metadata={"help": "Prefix headings with '#' markers"},
    )
    rule_char: str = field(
        default=DEFAULT_RULE_CHAR,
        metadata={"help": "Character used for horizontal rules"},
    )
    rule_fallback_width: int = field(
        default=DEFAULT_RULE_FALLBACK_WIDTH,
        metadata={"help": "Rule length when the width is unknown"},
    )
    max_depth: int = field(
        default=DEFAULT_MAX_DEPTH,
        metadata={"help": "Maximum block and span nesting depth"},
    )
    code_language: str = field(
        default=DEFAULT_CODE_LANGUAGE,
        metadata={"help": "Pygments lexer used for all code"},
    )
    code_theme: str = field(
        default=DEFAULT_CODE_THEME,
        metadata={"help": "Pygments style used for code colors"},
    )
    code_background: bool = field(
        default=DEFAULT_CODE_BACKGROUND,
        metadata={"help": "Emit theme background colors for code tokens"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges and markers.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        if self.width is not None and self.width <= 0:
            raise ValueError(f"width must be positive or None, got {self.width}")

        if self.max_depth <= 0:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")

        if self.rule_fallback_width <= 0:
            raise ValueError(f"rule_fallback_width must be positive, got {self.rule_fallback_width}")

        if len(self.rule_char) != 1 or cell_len(self.rule_char) == 0:
            raise ValueError(f"rule_char must be a single visible character, got {self.rule_char!r}")

        for name in ("quote_marker", "list_marker"):
            if "\n" in getattr(self, name):
                raise ValueError(f"{name} must not contain newlines")
