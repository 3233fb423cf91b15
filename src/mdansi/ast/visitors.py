#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdansi/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class used to walk document trees.
Every node class has one abstract ``visit_*`` method here, so a visitor that
forgets a node type cannot be instantiated: adding a node class to the model
and its method to this class makes every incomplete renderer fail loudly
instead of silently skipping the new construct.

Visit methods receive the node followed by whatever extra arguments were
handed to ``node.accept(visitor, *args)``.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Examples
    --------
    Visitor that collects code snippets:

        >>> class CodeCollector(NodeVisitor):
        ...     def __init__(self):
        ...         self.snippets = []
        ...
        ...     def visit_code(self, node):
        ...         self.snippets.append(node.content)
        ...
        ...     # remaining visit_* methods walk children ...

    """

    @abstractmethod
    def visit_document(self, node: Document, *args: Any) -> Any:
        """Visit a Document node."""

    @abstractmethod
    def visit_heading(self, node: Heading, *args: Any) -> Any:
        """Visit a Heading node."""

    @abstractmethod
    def visit_paragraph(self, node: Paragraph, *args: Any) -> Any:
        """Visit a Paragraph node."""

    @abstractmethod
    def visit_code_block(self, node: CodeBlock, *args: Any) -> Any:
        """Visit a CodeBlock node."""

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote, *args: Any) -> Any:
        """Visit a BlockQuote node."""

    @abstractmethod
    def visit_list(self, node: List, *args: Any) -> Any:
        """Visit a List node."""

    @abstractmethod
    def visit_list_item(self, node: ListItem, *args: Any) -> Any:
        """Visit a ListItem node (block content)."""

    @abstractmethod
    def visit_simple_list_item(self, node: SimpleListItem, *args: Any) -> Any:
        """Visit a SimpleListItem node (inline content)."""

    @abstractmethod
    def visit_raw_block(self, node: RawBlock, *args: Any) -> Any:
        """Visit a RawBlock node."""

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak, *args: Any) -> Any:
        """Visit a ThematicBreak node."""

    @abstractmethod
    def visit_text(self, node: Text, *args: Any) -> Any:
        """Visit a Text node."""

    @abstractmethod
    def visit_emphasis(self, node: Emphasis, *args: Any) -> Any:
        """Visit an Emphasis node."""

    @abstractmethod
    def visit_strong(self, node: Strong, *args: Any) -> Any:
        """Visit a Strong node."""

    @abstractmethod
    def visit_code(self, node: Code, *args: Any) -> Any:
        """Visit a Code node."""

    @abstractmethod
    def visit_link(self, node: Link, *args: Any) -> Any:
        """Visit a Link node."""

    @abstractmethod
    def visit_image(self, node: Image, *args: Any) -> Any:
        """Visit an Image node."""

    @abstractmethod
    def visit_line_break(self, node: LineBreak, *args: Any) -> Any:
        """Visit a LineBreak node."""

    def generic_visit(self, node: Node, *args: Any) -> Any:
        """Fallback visitor for node types without a dedicated visit method.

        The default implementation does nothing but can be overridden.

        Parameters
        ----------
        node : Node
            The node to visit

        Returns
        -------
        Any
            Result of processing (default: None)

        """
        return None
