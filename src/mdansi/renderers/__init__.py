#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers that turn the mdansi AST into output text."""

from mdansi.renderers.base import BaseRenderer
from mdansi.renderers.terminal import RenderContext, RenderDiagnostic, RenderResult, TerminalRenderer

__all__ = [
    "BaseRenderer",
    "RenderContext",
    "RenderDiagnostic",
    "RenderResult",
    "TerminalRenderer",
]
