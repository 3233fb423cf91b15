"""Pytest configuration and shared fixtures for the mdansi test suite.

This module provides shared fixtures, test configuration, and the stub
highlighter used to check how code output is framed.
"""

import os
from typing import Optional

import pytest
from hypothesis import Phase, Verbosity, settings

from mdansi.options import TerminalOptions
from mdansi.renderers.terminal import TerminalRenderer

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))

HIGHLIGHT_START = "<H>"
HIGHLIGHT_END = "<R>"


class FramingHighlighter:
    """Highlighter stub wrapping code in visible markers and recording calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Optional[str], str]] = []

    def highlight(self, code: str, language: Optional[str] = None, mode: str = "inline") -> str:
        self.calls.append((code, language, mode))
        return f"{HIGHLIGHT_START}{code}{HIGHLIGHT_END}"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def framing_highlighter() -> FramingHighlighter:
    """Provide a fresh framing highlighter stub."""
    return FramingHighlighter()


@pytest.fixture
def plain_renderer() -> TerminalRenderer:
    """Provide an unstyled, unwrapped terminal renderer."""
    return TerminalRenderer(TerminalOptions(styled=False))

