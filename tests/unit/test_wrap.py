#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_wrap.py
"""Unit tests for the width-aware wrapper and line prefixes.

Tests cover:
- Greedy filling at a target width
- Fixed and hanging prefixes, composition and continuation
- Width clamping, long words and hard line breaks
- Escape sequences and wide characters in width math
- Property-based checks of the width and content invariants

"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mdansi.utils.ansi import display_width
from mdansi.utils.wrap import NO_PREFIX, LinePrefix, expand_tabs, fill_line, wrap_and_prefix


@pytest.mark.unit
class TestLinePrefix:
    """Tests for LinePrefix construction and composition."""

    def test_fixed_prefix_repeats_marker(self) -> None:
        prefix = LinePrefix.fixed("> ")
        assert prefix.apply(["a", "b"]) == ["> a", "> b"]

    def test_hanging_prefix_pads_continuation(self) -> None:
        prefix = LinePrefix.hanging("10. ")
        assert prefix.apply(["a", "b", "c"]) == ["10. a", "    b", "    c"]

    def test_hanging_padding_uses_display_width(self) -> None:
        prefix = LinePrefix.hanging("\x1b[1m*\x1b[22m ")
        assert prefix.rest == "  "

    def test_extend_concatenates_outer_then_inner(self) -> None:
        prefix = LinePrefix.fixed("> ").extend(LinePrefix.fixed("> "))
        assert prefix == LinePrefix("> > ", "> > ")

    def test_extend_hanging_inside_fixed(self) -> None:
        prefix = LinePrefix.fixed("> ").extend(LinePrefix.hanging("* "))
        assert prefix == LinePrefix("> * ", ">   ")

    def test_continuation_drops_first_line_marker(self) -> None:
        prefix = LinePrefix.hanging("* ").continuation()
        assert prefix == LinePrefix("  ", "  ")

    def test_blank_line_keeps_visible_marker(self) -> None:
        assert LinePrefix.fixed("> ").blank_line() == "> "

    def test_blank_line_of_padding_is_empty(self) -> None:
        assert LinePrefix.hanging("* ").blank_line() == ""
        assert NO_PREFIX.blank_line() == ""

    def test_width_is_widest_side(self) -> None:
        assert LinePrefix("> ", ">   ").width == 4
        assert NO_PREFIX.width == 0


@pytest.mark.unit
class TestWrapAndPrefix:
    """Tests for wrap_and_prefix."""

    def test_wraps_at_width(self) -> None:
        assert wrap_and_prefix("hello world", 10) == "hello\nworld"

    def test_fits_on_one_line(self) -> None:
        assert wrap_and_prefix("hello world", 11) == "hello world"

    def test_no_width_returns_text_unchanged(self) -> None:
        text = "a very long line that is never reflowed\nsecond\n"
        assert wrap_and_prefix(text, None) == text

    def test_no_width_still_applies_prefix(self) -> None:
        result = wrap_and_prefix("one two three\nfour", None, LinePrefix.hanging("* "))
        assert result == "* one two three\n  four"

    def test_hanging_indent_on_wrapped_lines(self) -> None:
        result = wrap_and_prefix("one two three", 9, LinePrefix.hanging("* "))
        assert result == "* one two\n  three"

    def test_fixed_prefix_on_wrapped_lines(self) -> None:
        result = wrap_and_prefix("aa bb cc", 5, LinePrefix.fixed("> "))
        assert result == "> aa\n> bb\n> cc"

    def test_width_smaller_than_prefix_clamps_to_one_column(self) -> None:
        result = wrap_and_prefix("a b", 1, LinePrefix.fixed("> "))
        assert result == "> a\n> b"

    def test_long_word_is_not_broken(self) -> None:
        assert wrap_and_prefix("tiny supercalifragilistic end", 6) == "tiny\nsupercalifragilistic\nend"

    def test_one_trailing_newline_trimmed(self) -> None:
        assert wrap_and_prefix("abc\n", 10) == "abc"
        assert wrap_and_prefix("abc\n\n", 10) == "abc\n"

    def test_hard_line_breaks_are_kept(self) -> None:
        assert wrap_and_prefix("ab\ncd", 10) == "ab\ncd"

    def test_continuation_lines_drop_leading_whitespace(self) -> None:
        assert wrap_and_prefix("aaa    bbb", 3) == "aaa\nbbb"

    def test_empty_text_yields_bare_prefix(self) -> None:
        assert wrap_and_prefix("", 10, LinePrefix.hanging("* ")) == "* "

    def test_escape_sequences_have_no_width(self) -> None:
        text = "\x1b[1mhello\x1b[22m world"
        assert wrap_and_prefix(text, 11) == text

    def test_escape_at_line_end_stays_on_line(self) -> None:
        result = wrap_and_prefix("\x1b[1mhello\x1b[22m world", 7)
        assert result == "\x1b[1mhello\x1b[22m\nworld"

    def test_wide_characters_count_double(self) -> None:
        assert wrap_and_prefix("日本 語", 4) == "日本\n語"

    def test_tabs_are_expanded(self) -> None:
        assert wrap_and_prefix("a\tb", 20) == "a       b"

    def test_tab_stops_ignore_escape_sequences(self) -> None:
        assert wrap_and_prefix("\x1b[3mab\x1b[23m\tc", 40) == "\x1b[3mab\x1b[23m" + " " * 6 + "c"

    def test_tab_stops_count_wide_characters(self) -> None:
        assert expand_tabs("\u65e5\tx") == "\u65e5" + " " * 6 + "x"

    def test_tab_stops_restart_on_each_hard_line(self) -> None:
        assert wrap_and_prefix("abc\td\n\te", 40) == "abc     d\n        e"

    def test_styles_do_not_reach_prefixes(self) -> None:
        result = wrap_and_prefix("\x1b[3maaa bbb\x1b[23m", 5, LinePrefix.fixed("> "))
        assert result == "> \x1b[3maaa\x1b[23m\n> \x1b[3mbbb\x1b[23m"


@pytest.mark.unit
class TestFillLine:
    """Tests for fill_line."""

    def test_empty_line(self) -> None:
        assert fill_line("", 10) == [""]

    def test_leading_indent_of_first_line_is_kept(self) -> None:
        assert fill_line("  indented", 20) == ["  indented"]

    def test_non_breaking_space_is_not_a_break(self) -> None:
        assert fill_line("a\u00a0b c", 3) == ["a\u00a0b", "c"]


words = st.lists(st.text(alphabet="abcdefgh", min_size=1, max_size=8), min_size=1, max_size=30)


@pytest.mark.unit
class TestWrapProperties:
    """Property-based tests for the wrapper invariants."""

    @given(words=words, width=st.integers(min_value=8, max_value=60))
    def test_lines_never_exceed_width(self, words: list[str], width: int) -> None:
        result = wrap_and_prefix(" ".join(words), width)
        assert all(display_width(line) <= width for line in result.split("\n"))

    @given(words=words, width=st.integers(min_value=1, max_value=60))
    def test_wrapping_preserves_words(self, words: list[str], width: int) -> None:
        result = wrap_and_prefix(" ".join(words), width)
        assert result.split() == words

    @given(words=words, width=st.integers(min_value=12, max_value=60))
    def test_hanging_continuation_matches_marker_width(self, words: list[str], width: int) -> None:
        marker = "10. "
        lines = wrap_and_prefix(" ".join(words), width, LinePrefix.hanging(marker)).split("\n")
        assert lines[0].startswith(marker)
        for line in lines[1:]:
            assert line.startswith(" " * len(marker))
            assert not line[len(marker)].isspace()
            assert display_width(line) <= width

    @given(words=words, width=st.integers(min_value=4, max_value=60))
    def test_fixed_prefix_on_every_line(self, words: list[str], width: int) -> None:
        lines = wrap_and_prefix(" ".join(words), width, LinePrefix.fixed("> ")).split("\n")
        assert all(line.startswith("> ") for line in lines)
