#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_highlight.py
"""Unit tests for the Pygments-backed code highlighter."""

import pytest

from mdansi.constants import ANSI_RESET
from mdansi.exceptions import ValidationError
from mdansi.highlight import CodeHighlighter, PlainHighlighter
from mdansi.utils.ansi import strip_ansi


@pytest.fixture(scope="module")
def rust_highlighter() -> CodeHighlighter:
    return CodeHighlighter(language="rust", theme="monokai")


@pytest.mark.unit
class TestCodeHighlighter:
    """Tests for CodeHighlighter."""

    def test_ends_with_single_reset(self, rust_highlighter: CodeHighlighter) -> None:
        result = rust_highlighter.highlight("let x = 1;")
        assert result.endswith(ANSI_RESET)
        assert result.count(ANSI_RESET) == 1

    def test_emits_truecolor_escapes(self, rust_highlighter: CodeHighlighter) -> None:
        result = rust_highlighter.highlight("let x = 1;")
        assert "\x1b[38;2;" in result

    def test_block_mode_preserves_code(self, rust_highlighter: CodeHighlighter) -> None:
        code = "fn main() {\n    let x = 1;\n}"
        result = rust_highlighter.highlight(code, mode="block")
        assert strip_ansi(result) == code

    def test_block_mode_adds_no_trailing_newline(self, rust_highlighter: CodeHighlighter) -> None:
        result = rust_highlighter.highlight("let x = 1;", mode="block")
        assert not strip_ansi(result).endswith("\n")

    def test_inline_mode_joins_lines(self, rust_highlighter: CodeHighlighter) -> None:
        result = rust_highlighter.highlight("a\nb", mode="inline")
        assert "\n" not in result
        assert strip_ansi(result) == "a b"

    def test_language_argument_is_ignored(self, rust_highlighter: CodeHighlighter) -> None:
        code = "let x = 1;"
        assert rust_highlighter.highlight(code, "python") == rust_highlighter.highlight(code)

    def test_empty_code(self, rust_highlighter: CodeHighlighter) -> None:
        assert rust_highlighter.highlight("") == ANSI_RESET

    def test_other_lexer(self) -> None:
        result = CodeHighlighter(language="python").highlight("def f(): pass", mode="block")
        assert strip_ansi(result) == "def f(): pass"

    def test_unknown_language_raises(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            CodeHighlighter(language="definitely-not-a-language")
        assert exc_info.value.parameter_name == "code_language"

    def test_unknown_theme_raises(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            CodeHighlighter(theme="definitely-not-a-theme")
        assert exc_info.value.parameter_name == "code_theme"


@pytest.mark.unit
class TestPlainHighlighter:
    """Tests for PlainHighlighter."""

    def test_returns_code_unchanged(self) -> None:
        assert PlainHighlighter().highlight("let x = 1;\n", "rust", "block") == "let x = 1;\n"
