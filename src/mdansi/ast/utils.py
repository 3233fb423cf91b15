#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdansi/ast/utils.py
"""Utility functions for working with AST nodes.

Functions
---------
extract_text : Extract plain text from a node or list of nodes

Examples
--------
Extract text from a heading:

    >>> from mdansi.ast import Heading, Text, Emphasis
    >>> from mdansi.ast.utils import extract_text
    >>>
    >>> heading = Heading(level=1, content=[
    ...     Text(content="Hello "),
    ...     Emphasis(content=[Text(content="world")])
    ... ])
    >>> extract_text(heading, joiner="")
    'Hello world'

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from mdansi.ast.nodes import Code, CodeBlock, Image, RawBlock, Text, get_node_children

if TYPE_CHECKING:
    from mdansi.ast.nodes import Node


def extract_text(node_or_nodes: Union[Node, list[Node]], joiner: str = " ") -> str:
    """Extract plain text from a node or list of nodes.

    Text, inline code and raw/code block content are returned verbatim; image
    nodes contribute their alt text. Container nodes are traversed with
    ``get_node_children`` and their parts joined with ``joiner``.

    Parameters
    ----------
    node_or_nodes : Node or list of Node
        A single node or list of nodes to extract text from
    joiner : str, default = " "
        String used to join text parts. Use "" when the Text nodes already
        carry their own spacing.

    Returns
    -------
    str
        Concatenated text content

    """
    # explicit stack: degraded subtrees may be nested arbitrarily deep
    stack = list(reversed(node_or_nodes)) if isinstance(node_or_nodes, list) else [node_or_nodes]
    parts = []
    while stack:
        node = stack.pop()
        if isinstance(node, (Text, Code, CodeBlock, RawBlock)):
            parts.append(node.content)
        elif isinstance(node, Image):
            parts.append(node.alt_text)
        else:
            stack.extend(reversed(get_node_children(node)))
    return joiner.join(part for part in parts if part)


__all__ = [
    "extract_text",
]
