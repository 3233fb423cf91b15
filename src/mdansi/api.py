#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Convenience functions for rendering markdown to the terminal.

Examples
--------
    >>> from mdansi import render_markdown
    >>> from mdansi.options import TerminalOptions
    >>> render_markdown("* one\\n* two", TerminalOptions(styled=False))
    '* one\\n* two\\n\\n'

"""

from __future__ import annotations

from typing import Optional

from mdansi.ast import Document
from mdansi.options.terminal import TerminalOptions
from mdansi.parsers.markdown import tokenize
from mdansi.renderers.terminal import TerminalRenderer


def render(doc: Document, options: Optional[TerminalOptions] = None) -> str:
    """Render an AST Document to terminal text.

    Parameters
    ----------
    doc : Document
        Document to render
    options : TerminalOptions, optional
        Rendering options; defaults to ``TerminalOptions()``

    Returns
    -------
    str
        Rendered text, every top-level block followed by one blank line

    """
    return TerminalRenderer(options).render_to_string(doc)


def render_markdown(text: str, options: Optional[TerminalOptions] = None) -> str:
    """Tokenize markdown ``text`` and render it to terminal text.

    Parameters
    ----------
    text : str
        Markdown source
    options : TerminalOptions, optional
        Rendering options; defaults to ``TerminalOptions()``

    Returns
    -------
    str
        Rendered text

    """
    return render(tokenize(text), options)


__all__ = ["render", "render_markdown"]
