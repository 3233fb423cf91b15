"""mdansi - render markdown documents as ANSI-styled terminal text.

mdansi walks a parsed markdown document tree (headings, paragraphs, quotes,
lists, code fences, rules, raw blocks and their inline spans) and produces
width-aware text for a character terminal. Inline emphasis is rendered with
properly nested ANSI style scopes, code is syntax highlighted with Pygments,
and text is reflowed to the target width while keeping quote markers, list
bullets and hanging indents intact.

Requirements
------------
- Python 3.10+
- rich (display widths), pygments (highlighting), mistune (markdown parsing)

Examples
--------
Render markdown text:

    >>> from mdansi import render_markdown
    >>> from mdansi.options import TerminalOptions
    >>> print(render_markdown("Hello **world**", TerminalOptions(width=40)))

Working with the AST directly:

    >>> from mdansi import TerminalRenderer
    >>> from mdansi.ast import Document, Paragraph, Text
    >>> doc = Document(children=[Paragraph(content=[Text(content="Hi")])])
    >>> result = TerminalRenderer().render_document(doc)
    >>> result.text
    'Hi\\n\\n'

"""

from mdansi.api import render, render_markdown
from mdansi.exceptions import (
    InvalidOptionsError,
    MdAnsiError,
    RenderDepthExceededError,
    RenderingError,
    ValidationError,
)
from mdansi.options import TerminalOptions
from mdansi.parsers.markdown import tokenize
from mdansi.renderers.terminal import RenderDiagnostic, RenderResult, TerminalRenderer

__version__ = "0.1.0"

__all__ = [
    "InvalidOptionsError",
    "MdAnsiError",
    "RenderDepthExceededError",
    "RenderDiagnostic",
    "RenderResult",
    "RenderingError",
    "TerminalOptions",
    "TerminalRenderer",
    "ValidationError",
    "__version__",
    "render",
    "render_markdown",
    "tokenize",
]
