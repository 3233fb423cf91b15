#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdansi/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The tree produced by the markdown tokenizer and consumed by the terminal
renderer. The module consists of:

- nodes: AST node classes representing document structure
- visitors: Visitor pattern implementation for AST traversal
- utils: Plain-text extraction helpers

Examples
--------
Basic usage:

    >>> from mdansi.ast import Document, Heading, Paragraph, Text
    >>> from mdansi.renderers.terminal import TerminalRenderer
    >>>
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")]),
    ...     Paragraph(content=[Text(content="Hello world")])
    ... ])
    >>> text = TerminalRenderer().render_to_string(doc)

"""

from __future__ import annotations

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
    ListItemNode,
    Node,
    Paragraph,
    RawBlock,
    SimpleListItem,
    Strong,
    Text,
    ThematicBreak,
    get_node_children,
)
from mdansi.ast.utils import extract_text
from mdansi.ast.visitors import NodeVisitor

__all__ = [
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "Heading",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "ListItemNode",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "RawBlock",
    "SimpleListItem",
    "Strong",
    "Text",
    "ThematicBreak",
    "extract_text",
    "get_node_children",
]
