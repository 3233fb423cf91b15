#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdansi/renderers/terminal.py
"""ANSI terminal rendering from AST.

This module provides the TerminalRenderer class which converts AST nodes to
width-aware, ANSI-styled text for a character terminal:

- Inline content is rendered to a single string. Emphasis and strong open a
  style scope that is closed by its own "off" sequence, inline code is handed
  to the highlighter, links and images are written out with their target
  underlined.
- Block content is rendered to lines. Paragraph-like blocks are reflowed to
  the target width with the accumulated line prefix (quote markers, list
  bullets and their hanging indent); code, raw text and rules are prefixed
  but never reflowed.

All per-call state travels down the tree in an immutable RenderContext, so a
single renderer instance can render several documents independently.

Problems that should not abort a render (constructs the renderer does not
know, documents nested deeper than ``max_depth``) are logged and collected as
diagnostics; ``render_document`` returns them alongside the text.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Iterator, Optional

from mdansi.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    RawBlock,
    SimpleListItem,
    Strong,
    Text,
    ThematicBreak,
)
from mdansi.ast.utils import extract_text
from mdansi.ast.visitors import NodeVisitor
from mdansi.constants import ANSI_RESET, DEFAULT_IMAGE_LABEL, DiagnosticKind
from mdansi.exceptions import RenderDepthExceededError, format_node_path
from mdansi.highlight import CodeHighlighter, Highlighter, PlainHighlighter
from mdansi.options.terminal import TerminalOptions
from mdansi.renderers.base import BaseRenderer
from mdansi.utils.ansi import (
    BOLD,
    ITALIC,
    UNDERLINE,
    AnsiStyle,
    StyleStack,
    close_scope,
    display_width,
    open_scope,
    reopen_scopes,
)
from mdansi.utils.wrap import NO_PREFIX, LinePrefix, wrap_and_prefix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderDiagnostic:
    """A recoverable problem met while rendering.

    Parameters
    ----------
    kind : {"unsupported", "depth"}
        Category of the problem
    path : tuple of int
        Child indices from the document root to the offending node
    message : str
        Human-readable description

    """

    kind: DiagnosticKind
    path: tuple[int, ...]
    message: str


@dataclass(frozen=True)
class RenderResult:
    """Rendered text together with the diagnostics of the render call."""

    text: str
    diagnostics: list[RenderDiagnostic] = field(default_factory=list)


@dataclass(frozen=True)
class RenderContext:
    """State carried down the tree during one render call.

    Parameters
    ----------
    width : int or None
        Target column width, None when output is not reflowed
    prefix : LinePrefix
        Accumulated line prefix of the current block
    styles : tuple of AnsiStyle
        Active inline style scopes, innermost last
    depth : int
        Block nesting depth of the current node
    inline_depth : int
        Span nesting depth inside the current block
    path : tuple of int
        Child indices from the document root to the current node
    diagnostics : list of RenderDiagnostic
        Sink shared by every context of the same render call

    """

    width: Optional[int]
    prefix: LinePrefix = NO_PREFIX
    styles: StyleStack = ()
    depth: int = 0
    inline_depth: int = 0
    path: tuple[int, ...] = ()
    diagnostics: list[RenderDiagnostic] = field(default_factory=list, compare=False, repr=False)

    def with_prefix(self, prefix: LinePrefix) -> RenderContext:
        return replace(self, prefix=prefix)

    def descend(self, index: int) -> RenderContext:
        """Return the context of the ``index``-th child block."""
        return replace(self, depth=self.depth + 1, path=self.path + (index,))

    def push_style(self, style: AnsiStyle) -> tuple[RenderContext, str]:
        """Open ``style``; return the inner context and the opening sequence."""
        styles, opening = open_scope(self.styles, style)
        return replace(self, styles=styles), opening


class TerminalRenderer(NodeVisitor, BaseRenderer):
    """Render AST nodes to ANSI-styled terminal text.

    Every top-level block is followed by exactly one blank line. Inside block
    quotes and list items consecutive blocks are separated by one blank line
    that carries the current prefix.

    Parameters
    ----------
    options : TerminalOptions or None, default = None
        Terminal rendering options
    highlighter : Highlighter or None, default = None
        Code highlighter. Defaults to a CodeHighlighter built from the options
        when styling is enabled, and a PlainHighlighter otherwise.

    Notes
    -----
    Link titles are dropped: a link renders as ``text (url)`` only. This is a
    deliberate simplification, not an oversight.

    Examples
    --------
        >>> from mdansi.ast import Document, Paragraph, Text, Strong
        >>> from mdansi.options import TerminalOptions
        >>> doc = Document(children=[
        ...     Paragraph(content=[Text(content="Hello "), Strong(content=[Text(content="world")])])
        ... ])
        >>> renderer = TerminalRenderer(TerminalOptions(styled=False))
        >>> renderer.render_to_string(doc)
        'Hello world\\n\\n'

    """

    def __init__(self, options: TerminalOptions | None = None, highlighter: Highlighter | None = None):
        """Initialize the terminal renderer with options and a highlighter."""
        BaseRenderer._validate_options_type(options, TerminalOptions, "terminal")
        options = options or TerminalOptions()
        BaseRenderer.__init__(self, options)
        self.options: TerminalOptions = options

        if highlighter is not None:
            self.highlighter: Highlighter = highlighter
        elif options.styled:
            self.highlighter = CodeHighlighter(options.code_language, options.code_theme, options.code_background)
        else:
            self.highlighter = PlainHighlighter()

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def new_context(self) -> RenderContext:
        """Create the root context for one render call."""
        return RenderContext(width=self.options.width)

    def iter_render(self, doc: Document) -> Iterator[str]:
        """Yield each top-level block followed by its blank separator line."""
        return self._iter_blocks(doc, self.new_context())

    def render_document(self, doc: Document) -> RenderResult:
        """Render ``doc`` and return the text with the call's diagnostics."""
        context = self.new_context()
        text = "".join(self._iter_blocks(doc, context))
        return RenderResult(text=text, diagnostics=list(context.diagnostics))

    def render_spans(self, spans: list[Node], context: RenderContext) -> str:
        """Render a sequence of inline nodes to one string.

        Spans nested deeper than ``max_depth`` are reported and rendered as
        their plain text.
        """
        span_context = replace(context, inline_depth=context.inline_depth + 1)
        if span_context.inline_depth > self.options.max_depth:
            error = RenderDepthExceededError(context.path, self.options.max_depth, stage="inline")
            if self.options.strict:
                raise error
            self._report(context, "depth", error.message)
            return extract_text(spans, joiner="")
        return "".join(self._render_inline(span, span_context) for span in spans)

    def _iter_blocks(self, doc: Document, context: RenderContext) -> Iterator[str]:
        for index, block in enumerate(doc.children):
            lines = self._render_child(block, context, index)
            if lines is None:
                continue
            yield "".join(f"{line}\n" for line in lines) + "\n"

    # ------------------------------------------------------------------
    # Dispatch helpers
    # ------------------------------------------------------------------

    def _render_child(self, node: Any, context: RenderContext, index: int) -> list[str] | None:
        child_context = context.descend(index)
        if child_context.depth > self.options.max_depth:
            error = RenderDepthExceededError(child_context.path, self.options.max_depth)
            if self.options.strict:
                raise error
            self._report(child_context, "depth", error.message)
            return None
        return self._render_block(node, child_context)

    def _render_block(self, node: Any, context: RenderContext) -> list[str]:
        if not isinstance(node, Node):
            self._report(context, "unsupported", f"Not a document node: {type(node).__name__}")
            return self._wrap(str(node), context)

        result = node.accept(self, context)
        # inline nodes and degraded constructs come back as text
        if isinstance(result, str):
            return self._wrap(result, context)
        return result

    def _render_inline(self, node: Any, context: RenderContext) -> str:
        if not isinstance(node, Node):
            self._report(context, "unsupported", f"Not a document node: {type(node).__name__}")
            return str(node)

        result = node.accept(self, context)
        if isinstance(result, list):
            return "\n".join(result)
        return result

    def _render_children(self, children: list[Node], context: RenderContext) -> list[str]:
        lines: list[str] = []
        prefix = context.prefix
        for index, child in enumerate(children):
            child_lines = self._render_child(child, context.with_prefix(prefix), index)
            if child_lines is None:
                continue
            if lines:
                lines.append(prefix.blank_line())
            lines.extend(child_lines)
            if child_lines:
                prefix = prefix.continuation()
        return lines

    def _wrap(self, text: str, context: RenderContext) -> list[str]:
        return wrap_and_prefix(text, context.width, context.prefix).split("\n")

    def _report(self, context: RenderContext, kind: DiagnosticKind, message: str) -> None:
        context.diagnostics.append(RenderDiagnostic(kind=kind, path=context.path, message=message))
        if kind == "depth":
            logger.error(message)
        else:
            logger.warning("%s at %s; rendering as plain text", message, format_node_path(context.path))

    def generic_visit(self, node: Node, *args: Any) -> str:
        """Degrade an unknown construct to its plain text."""
        context = args[0] if args else self.new_context()
        self._report(context, "unsupported", f"Unsupported node type: {type(node).__name__}")
        return extract_text(node, joiner="")

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document, context: RenderContext) -> list[str]:
        """Render a nested Document like a container block."""
        return self._render_children(node.children, context)

    def visit_heading(self, node: Heading, context: RenderContext) -> list[str]:
        """Render a Heading node like a paragraph."""
        text = self.render_spans(node.content, context)
        if self.options.heading_markers:
            text = f"{'#' * node.level} {text}"
        return self._wrap(text, context)

    def visit_paragraph(self, node: Paragraph, context: RenderContext) -> list[str]:
        """Render a Paragraph node, reflowed to the context width."""
        return self._wrap(self.render_spans(node.content, context), context)

    def visit_code_block(self, node: CodeBlock, context: RenderContext) -> list[str]:
        """Render a CodeBlock node highlighted and never reflowed."""
        code = node.content
        if code.endswith("\n"):
            code = code[:-1]
        highlighted = self.highlighter.highlight(code, node.language, "block")
        return context.prefix.apply(highlighted.split("\n"))

    def visit_block_quote(self, node: BlockQuote, context: RenderContext) -> list[str]:
        """Render a BlockQuote node, extending the prefix with the quote marker."""
        quote_prefix = context.prefix.extend(LinePrefix.fixed(self.options.quote_marker))
        return self._render_children(node.children, context.with_prefix(quote_prefix))

    def visit_list(self, node: List, context: RenderContext) -> list[str]:
        """Render a List node, one hanging marker per item."""
        lines: list[str] = []
        prefix = context.prefix
        for index, item in enumerate(node.items):
            marker = self._list_marker(node, index)
            item_context = context.with_prefix(prefix.extend(LinePrefix.hanging(marker)))
            item_lines = self._render_child(item, item_context, index)
            if item_lines is None:
                continue
            lines.extend(item_lines)
            if item_lines:
                prefix = prefix.continuation()
        return lines

    def visit_list_item(self, node: ListItem, context: RenderContext) -> list[str]:
        """Render a ListItem node; its first emitted line carries the marker."""
        lines = self._render_children(node.children, context)
        if not lines:
            return [context.prefix.first.rstrip()]
        return lines

    def visit_simple_list_item(self, node: SimpleListItem, context: RenderContext) -> list[str]:
        """Render a SimpleListItem node with a hanging indent."""
        return self._wrap(self.render_spans(node.content, context), context)

    def visit_raw_block(self, node: RawBlock, context: RenderContext) -> list[str]:
        """Render a RawBlock node verbatim."""
        content = node.content[:-1] if node.content.endswith("\n") else node.content
        return context.prefix.apply(content.split("\n"))

    def visit_thematic_break(self, node: ThematicBreak, context: RenderContext) -> list[str]:
        """Render a ThematicBreak node as a full-width rule."""
        rule_char = self.options.rule_char
        if context.width is None:
            count = self.options.rule_fallback_width
        else:
            available = context.width - context.prefix.width
            count = max(1, available // display_width(rule_char))
        return context.prefix.apply([rule_char * count])

    def _list_marker(self, node: List, index: int) -> str:
        if node.ordered and self.options.number_ordered_lists:
            return f"{node.start + index}. "
        return self.options.list_marker

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text, context: RenderContext) -> str:
        """Render a Text node verbatim."""
        return node.content

    def visit_line_break(self, node: LineBreak, context: RenderContext) -> str:
        """Render a hard break as a newline and a soft break as a space."""
        return " " if node.soft else "\n"

    def visit_code(self, node: Code, context: RenderContext) -> str:
        """Render inline Code through the highlighter."""
        highlighted = self.highlighter.highlight(node.content, None, "inline")
        if not self.options.styled:
            return highlighted
        if not highlighted.endswith(ANSI_RESET):
            highlighted += ANSI_RESET
        # the reset also cleared any enclosing emphasis or strong
        return highlighted + reopen_scopes(context.styles)

    def visit_emphasis(self, node: Emphasis, context: RenderContext) -> str:
        """Render an Emphasis node in italics."""
        return self._render_scoped(node.content, ITALIC, context)

    def visit_strong(self, node: Strong, context: RenderContext) -> str:
        """Render a Strong node in bold."""
        return self._render_scoped(node.content, BOLD, context)

    def visit_link(self, node: Link, context: RenderContext) -> str:
        """Render a Link node as ``text (url)``; the title is dropped."""
        text = self.render_spans(node.content, context)
        return f"{text} ({self._underline(node.url, context)})"

    def visit_image(self, node: Image, context: RenderContext) -> str:
        """Render an Image node as ``[title: alt] (url)``."""
        label = node.title or DEFAULT_IMAGE_LABEL
        return f"[{label}: {node.alt_text}] ({self._underline(node.url, context)})"

    def _render_scoped(self, children: list[Node], style: AnsiStyle, context: RenderContext) -> str:
        if not self.options.styled:
            return self.render_spans(children, context)
        inner, opening = context.push_style(style)
        return opening + self.render_spans(children, inner) + close_scope(inner.styles)

    def _underline(self, text: str, context: RenderContext) -> str:
        if not self.options.styled:
            return text
        inner, opening = context.push_style(UNDERLINE)
        return opening + text + close_scope(inner.styles)
