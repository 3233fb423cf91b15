#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_ansi_styles.py
"""Unit tests for ANSI style scopes and display width helpers."""

import pytest

from mdansi.utils.ansi import (
    BOLD,
    ITALIC,
    UNDERLINE,
    carry_styles,
    close_scope,
    display_width,
    open_scope,
    reopen_scopes,
    strip_ansi,
    track_sgr,
)


@pytest.mark.unit
class TestStyleScopes:
    """Tests for opening and closing style scopes."""

    def test_open_scope_pushes_style(self) -> None:
        stack, opening = open_scope((), BOLD)
        assert stack == (BOLD,)
        assert opening == "\x1b[1m"

    def test_close_scope_emits_own_off_code(self) -> None:
        assert close_scope((BOLD,)) == "\x1b[22m"
        assert close_scope((ITALIC,)) == "\x1b[23m"
        assert close_scope((UNDERLINE,)) == "\x1b[24m"

    def test_close_inner_keeps_unrelated_outer_style(self) -> None:
        assert close_scope((BOLD, ITALIC)) == "\x1b[23m"

    def test_close_inner_reopens_outer_with_same_off_code(self) -> None:
        assert close_scope((BOLD, BOLD)) == "\x1b[22m\x1b[1m"

    def test_close_empty_stack(self) -> None:
        assert close_scope(()) == ""

    def test_reopen_scopes_outermost_first(self) -> None:
        assert reopen_scopes((BOLD, ITALIC)) == "\x1b[1m\x1b[3m"
        assert reopen_scopes(()) == ""

    def test_opening_never_mutates_stack(self) -> None:
        outer = (BOLD,)
        open_scope(outer, ITALIC)
        assert outer == (BOLD,)


@pytest.mark.unit
class TestDisplayWidth:
    """Tests for escape stripping and width measurement."""

    def test_strip_ansi(self) -> None:
        assert strip_ansi("\x1b[1mbold\x1b[22m \x1b[38;2;1;2;3mx\x1b[0m") == "bold x"

    def test_escapes_have_zero_width(self) -> None:
        assert display_width("\x1b[3mabc\x1b[23m") == 3

    def test_wide_characters(self) -> None:
        assert display_width("日本") == 4

    def test_plain_ascii(self) -> None:
        assert display_width("hello") == 5


@pytest.mark.unit
class TestStyleCarrying:
    """Tests for tracking open attributes across line ends."""

    def test_track_open_and_close(self) -> None:
        assert track_sgr("\x1b[1mbold", {}) == {"intensity": "\x1b[1m"}
        assert track_sgr("\x1b[1mbold\x1b[22m", {}) == {}

    def test_track_truecolor_and_background(self) -> None:
        state = track_sgr("\x1b[38;2;1;2;3m\x1b[48;5;17mx", {})
        assert state == {"foreground": "\x1b[38;2;1;2;3m", "background": "\x1b[48;5;17m"}

    def test_default_foreground_closes_color(self) -> None:
        assert track_sgr("\x1b[38;2;1;2;3mx\x1b[39my", {}) == {}

    def test_reset_clears_everything(self) -> None:
        assert track_sgr("\x1b[3m\x1b[4mx\x1b[0m", {}) == {}
        assert track_sgr("\x1b[3mx\x1b[m", {}) == {}

    def test_state_is_not_mutated(self) -> None:
        state = {"italic": "\x1b[3m"}
        track_sgr("\x1b[23m", state)
        assert state == {"italic": "\x1b[3m"}

    def test_open_style_moves_to_next_line(self) -> None:
        lines = carry_styles(["\x1b[3maaa", "bbb", "ccc\x1b[23m"])
        assert lines == ["\x1b[3maaa\x1b[23m", "\x1b[3mbbb\x1b[23m", "\x1b[3mccc\x1b[23m"]

    def test_empty_lines_stay_empty(self) -> None:
        assert carry_styles(["\x1b[1ma", "", "b\x1b[22m"]) == ["\x1b[1ma\x1b[22m", "", "\x1b[1mb\x1b[22m"]

    def test_closed_lines_are_unchanged(self) -> None:
        assert carry_styles(["\x1b[1ma\x1b[22m", "b"]) == ["\x1b[1ma\x1b[22m", "b"]
