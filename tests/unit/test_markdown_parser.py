#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_markdown_parser.py
"""Unit tests for the mistune-backed markdown tokenizer."""

import pytest

from mdansi.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Emphasis,
    Heading,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Paragraph,
    RawBlock,
    SimpleListItem,
    Strong,
    ThematicBreak,
    extract_text,
)
from mdansi.parsers.markdown import MarkdownTokenizer, tokenize


@pytest.mark.unit
class TestBlockTokens:
    """Tests for block-level token mapping."""

    def test_empty_input(self) -> None:
        assert tokenize("").children == []

    def test_heading_and_paragraph(self) -> None:
        doc = tokenize("## Title\n\nSome text.")
        heading, paragraph = doc.children
        assert isinstance(heading, Heading)
        assert heading.level == 2
        assert extract_text(heading, joiner="") == "Title"
        assert isinstance(paragraph, Paragraph)
        assert extract_text(paragraph, joiner="") == "Some text."

    def test_tight_list_items_are_simple(self) -> None:
        doc = tokenize("* one\n* two\n")
        (lst,) = doc.children
        assert isinstance(lst, List)
        assert not lst.ordered
        assert all(isinstance(item, SimpleListItem) for item in lst.items)
        assert [extract_text(item, joiner="") for item in lst.items] == ["one", "two"]

    def test_ordered_list_start(self) -> None:
        (lst,) = tokenize("3. a\n4. b\n").children
        assert lst.ordered
        assert lst.start == 3

    def test_ordered_list_default_start(self) -> None:
        (lst,) = tokenize("1. a\n2. b\n").children
        assert lst.start == 1

    def test_loose_list_item_holds_blocks(self) -> None:
        (lst,) = tokenize("* first\n\n  second\n").children
        (item,) = lst.items
        assert isinstance(item, ListItem)
        assert [type(child) for child in item.children] == [Paragraph, Paragraph]

    def test_nested_list(self) -> None:
        (lst,) = tokenize("* outer\n  * inner\n").children
        (item,) = lst.items
        assert isinstance(item, ListItem)
        assert isinstance(item.children[-1], List)

    def test_block_quote(self) -> None:
        (quote,) = tokenize("> quoted\n").children
        assert isinstance(quote, BlockQuote)
        assert isinstance(quote.children[0], Paragraph)

    def test_fenced_code(self) -> None:
        (code,) = tokenize("```rust ignore\nlet x = 1;\n```\n").children
        assert isinstance(code, CodeBlock)
        assert code.content == "let x = 1;\n"
        assert code.language == "rust"

    def test_fenced_code_without_language(self) -> None:
        (code,) = tokenize("```\nplain\n```\n").children
        assert code.language is None

    def test_thematic_break(self) -> None:
        assert isinstance(tokenize("---\n").children[0], ThematicBreak)

    def test_html_block_is_raw(self) -> None:
        (raw,) = tokenize("<div>\nhi\n</div>\n").children
        assert isinstance(raw, RawBlock)
        assert raw.content.startswith("<div>")


@pytest.mark.unit
class TestInlineTokens:
    """Tests for inline token mapping."""

    def _spans(self, text: str) -> list:
        (paragraph,) = tokenize(text).children
        return paragraph.content

    def test_strong_emphasis_code(self) -> None:
        spans = self._spans("a **b** *c* `d`")
        kinds = [type(span) for span in spans]
        assert Strong in kinds
        assert Emphasis in kinds
        assert Code in kinds
        code = next(span for span in spans if isinstance(span, Code))
        assert code.content == "d"

    def test_soft_break(self) -> None:
        spans = self._spans("line one\nline two")
        breaks = [span for span in spans if isinstance(span, LineBreak)]
        assert len(breaks) == 1
        assert breaks[0].soft

    def test_hard_break(self) -> None:
        spans = self._spans("line one  \nline two")
        breaks = [span for span in spans if isinstance(span, LineBreak)]
        assert len(breaks) == 1
        assert not breaks[0].soft

    def test_link(self) -> None:
        (link,) = self._spans('[site](https://example.com "Title")')
        assert isinstance(link, Link)
        assert link.url == "https://example.com"
        assert link.title == "Title"
        assert extract_text(link, joiner="") == "site"

    def test_image(self) -> None:
        (image,) = self._spans("![a cat](cat.png)")
        assert isinstance(image, Image)
        assert image.url == "cat.png"
        assert image.alt_text == "a cat"


@pytest.mark.unit
class TestTokenizerReuse:
    """Tests for reusing one tokenizer instance."""

    def test_independent_documents(self) -> None:
        tokenizer = MarkdownTokenizer()
        first = tokenizer.tokenize("# one")
        second = tokenizer.tokenize("two")
        assert isinstance(first.children[0], Heading)
        assert isinstance(second.children[0], Paragraph)
