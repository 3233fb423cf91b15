#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options and settings for mdansi renderers.

Options are frozen dataclasses: build a modified copy with
``options.create_updated(...)`` instead of mutating an instance.
"""

from __future__ import annotations

from mdansi.options.base import BaseRendererOptions, CloneFrozenMixin
from mdansi.options.terminal import TerminalOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "TerminalOptions",
]
