#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdansi/parsers/markdown.py
"""Markdown to AST tokenizer.

This module turns markdown text into the mdansi AST using the mistune parser.
It is a thin adapter: mistune does all of the parsing and this module only
maps mistune's token dictionaries onto mdansi node classes.

Token types outside the renderer's vocabulary (tables, footnotes, math) are
never produced because no mistune plugins are enabled; anything else
unexpected is dropped with a debug log.

"""

from __future__ import annotations

import logging
from typing import Any

import mistune

from mdansi.ast import (
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
)

logger = logging.getLogger(__name__)


class MarkdownTokenizer:
    """Convert markdown text to an AST Document.

    Examples
    --------
        >>> doc = MarkdownTokenizer().tokenize("# Hello\\n\\nThis is **bold**.")
        >>> [type(node).__name__ for node in doc.children]
        ['Heading', 'Paragraph']

    """

    def __init__(self) -> None:
        """Create the underlying mistune parser."""
        # renderer=None makes mistune return tokens instead of HTML
        self._markdown = mistune.create_markdown(renderer=None)

    def tokenize(self, text: str) -> Document:
        """Parse markdown ``text`` into an AST Document.

        Parameters
        ----------
        text : str
            Markdown source

        Returns
        -------
        Document
            AST document node

        """
        tokens, _state = self._markdown.parse(text)
        children = self._process_tokens(tokens) if isinstance(tokens, list) else []
        return Document(children=children)

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single block-level mistune token into an AST node."""
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            return Paragraph(content=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return RawBlock(content=token.get("raw", ""))
        elif token_type == "blank_line":
            return None

        logger.debug("Dropping unsupported markdown token: %s", token_type)
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1
        level = max(1, min(6, level))
        return Heading(level=level, content=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        attrs = token.get("attrs", {})
        info = attrs.get("info") if isinstance(attrs, dict) else None
        # only the first word of the info string names the language
        language = info.split(None, 1)[0] if info and info.strip() else None
        return CodeBlock(content=token.get("raw", ""), language=language)

    def _process_list(self, token: dict[str, Any]) -> List:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        children = token.get("children", [])
        if not isinstance(children, list):
            children = []

        items = [self._process_list_item(child) for child in children if isinstance(child, dict)]
        return List(ordered=bool(attrs.get("ordered", False)), items=items, start=attrs.get("start", 1))

    def _process_list_item(self, token: dict[str, Any]) -> ListItemNode:
        """Process a list item; a lone line of text becomes a SimpleListItem."""
        children = token.get("children", [])
        if len(children) == 1 and children[0].get("type") == "block_text":
            return SimpleListItem(content=self._process_inline_tokens(children[0].get("children", [])))
        return ListItem(children=self._process_tokens(children))

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_inline_token(self, token: dict[str, Any]) -> Node | None:
        token_type = token.get("type", "")

        handler_map: dict[str, Any] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            "softbreak": self._handle_softbreak_token,
            "inline_html": self._handle_text_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)

        logger.debug("Dropping unsupported inline markdown token: %s", token_type)
        return None

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        return Text(content=token.get("raw", ""))

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        return Strong(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        return Emphasis(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_codespan_token(self, token: dict[str, Any]) -> Code:
        return Code(content=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        content = self._process_inline_tokens(token.get("children", []))
        return Link(url=attrs.get("url", ""), content=content, title=attrs.get("title"))

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        # alt text arrives as child text tokens
        alt_text = "".join(
            child.get("raw", "")
            for child in token.get("children", [])
            if isinstance(child, dict) and child.get("type") == "text"
        )
        return Image(url=attrs.get("url", ""), alt_text=alt_text, title=attrs.get("title"))

    def _handle_linebreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=False)

    def _handle_softbreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=True)


def tokenize(text: str) -> Document:
    """Parse markdown ``text`` into an AST Document.

    Convenience wrapper around :class:`MarkdownTokenizer`.
    """
    return MarkdownTokenizer().tokenize(text)


__all__ = ["MarkdownTokenizer", "tokenize"]
