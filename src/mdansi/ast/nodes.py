#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdansi/ast/nodes.py
"""AST node classes for document representation.

This module defines the node hierarchy the terminal renderer consumes. A
document is produced once by a tokenizer, handed to the renderer and then
discarded; nodes are frozen dataclasses and are never mutated after
construction.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes represent structural document elements:
    - Document, Heading, Paragraph, CodeBlock, BlockQuote
    - List, ListItem, SimpleListItem, RawBlock, ThematicBreak

Inline nodes represent text formatting:
    - Text, Emphasis, Strong, Code
    - Link, Image, LineBreak

Visitor arguments
-----------------
``accept`` forwards any extra positional arguments to the visitor method. The
terminal renderer uses this to pass its immutable render context down the
tree instead of keeping it in shared mutable state.

"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, field
from typing import Any, Optional, Union


class Node(ABC):
    """Base class for all AST nodes.

    Concrete node classes override ``accept`` to call their own ``visit_*``
    method. A node class that does not (for example one added by a newer
    tokenizer) falls back to ``visitor.generic_visit`` so renderers can
    degrade gracefully instead of failing.

    """

    metadata: dict[str, Any]

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods
        *args : Any
            Extra arguments forwarded to the visitor method

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        return visitor.generic_visit(self, *args)


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass(frozen=True)
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self, *args)


@dataclass(frozen=True)
class Heading(Node):
    """Heading node (h1-h6).

    The level is validated but the terminal renderer does not style headings
    by level; they render like paragraphs unless heading markers are enabled.

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    content : list of Node, default = empty list
        Inline nodes representing heading text
    metadata : dict, default = empty dict
        Heading metadata

    """

    level: int
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this heading."""
        return visitor.visit_heading(self, *args)


@dataclass(frozen=True)
class Paragraph(Node):
    """Paragraph node containing inline content.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes representing paragraph content
    metadata : dict, default = empty dict
        Paragraph metadata

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self, *args)


@dataclass(frozen=True)
class CodeBlock(Node):
    """Code block node with optional language tag.

    Parameters
    ----------
    content : str
        Code content (not parsed as markdown)
    language : str or None, default = None
        Language tag from the fence info string. Accepted for completeness;
        the terminal renderer highlights every block with the lexer chosen at
        startup.
    metadata : dict, default = empty dict
        Code block metadata

    """

    content: str
    language: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this code block."""
        return visitor.visit_code_block(self, *args)


@dataclass(frozen=True)
class BlockQuote(Node):
    """Block quote node containing other block elements.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the quote
    metadata : dict, default = empty dict
        Block quote metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this block quote."""
        return visitor.visit_block_quote(self, *args)


@dataclass(frozen=True)
class ListItem(Node):
    """List item node containing block content.

    Used for loose list items whose content spans several blocks
    (paragraphs, nested lists, code). For single-line items see
    :class:`SimpleListItem`.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the list item
    metadata : dict, default = empty dict
        List item metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self, *args)


@dataclass(frozen=True)
class SimpleListItem(Node):
    """List item node holding a single run of inline content.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes of the item
    metadata : dict, default = empty dict
        List item metadata

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_simple_list_item(self, *args)


ListItemNode = Union[ListItem, SimpleListItem]


@dataclass(frozen=True)
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool
        True for ordered lists, False for unordered
    items : list of ListItem or SimpleListItem, default = empty list
        List items
    start : int, default = 1
        Starting number for ordered lists
    metadata : dict, default = empty dict
        List metadata

    """

    ordered: bool
    items: list[ListItemNode] = field(default_factory=list)
    start: int = 1
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_list(self, *args)


@dataclass(frozen=True)
class RawBlock(Node):
    """Literal text block emitted without inline processing or wrapping.

    Parameters
    ----------
    content : str
        Raw text (for example an HTML block from the source)
    metadata : dict, default = empty dict
        Block metadata

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this raw block."""
        return visitor.visit_raw_block(self, *args)


@dataclass(frozen=True)
class ThematicBreak(Node):
    """Thematic break node (horizontal rule)."""

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this thematic break."""
        return visitor.visit_thematic_break(self, *args)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass(frozen=True)
class Text(Node):
    """Plain text node.

    Parameters
    ----------
    content : str
        Text content
    metadata : dict, default = empty dict
        Text metadata

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this text."""
        return visitor.visit_text(self, *args)


@dataclass(frozen=True)
class Emphasis(Node):
    """Emphasis (italic) node.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes with emphasis
    metadata : dict, default = empty dict
        Emphasis metadata

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this emphasis."""
        return visitor.visit_emphasis(self, *args)


@dataclass(frozen=True)
class Strong(Node):
    """Strong (bold) node.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes with strong emphasis
    metadata : dict, default = empty dict
        Strong metadata

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this strong emphasis."""
        return visitor.visit_strong(self, *args)


@dataclass(frozen=True)
class Code(Node):
    """Inline code node.

    Parameters
    ----------
    content : str
        Code content
    metadata : dict, default = empty dict
        Code metadata

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this inline code."""
        return visitor.visit_code(self, *args)


@dataclass(frozen=True)
class Link(Node):
    """Link node.

    Parameters
    ----------
    url : str
        Link destination URL
    content : list of Node, default = empty list
        Inline nodes representing link text
    title : str or None, default = None
        Optional link title. Terminal output has nowhere to show it, so the
        renderer drops it.
    metadata : dict, default = empty dict
        Link metadata

    """

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this link."""
        return visitor.visit_link(self, *args)


@dataclass(frozen=True)
class Image(Node):
    """Image node.

    Parameters
    ----------
    url : str
        Image source URL
    alt_text : str, default = ''
        Alternative text description
    title : str or None, default = None
        Optional image title
    metadata : dict, default = empty dict
        Image metadata

    """

    url: str
    alt_text: str = ""
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this image."""
        return visitor.visit_image(self, *args)


@dataclass(frozen=True)
class LineBreak(Node):
    """Line break node.

    Parameters
    ----------
    soft : bool, default = False
        True for soft breaks (newline in source), False for hard breaks
    metadata : dict, default = empty dict
        Line break metadata

    """

    soft: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this line break."""
        return visitor.visit_line_break(self, *args)


def get_node_children(node: Node) -> list[Node]:
    """Get all child nodes from a node.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        List of child nodes (empty list if node has no children)

    """
    if isinstance(node, (Document, BlockQuote, ListItem)):
        return list(node.children)

    if isinstance(node, (Heading, Paragraph, SimpleListItem, Emphasis, Strong, Link)):
        return list(node.content)

    if isinstance(node, List):
        return list(node.items)

    # Unknown node classes may still expose the usual container attributes
    for attr in ("children", "content", "items"):
        value = getattr(node, attr, None)
        if isinstance(value, list):
            return [child for child in value if isinstance(child, Node)]

    return []
