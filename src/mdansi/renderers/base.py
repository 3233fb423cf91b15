#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdansi/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that renderers inherit from. The
BaseRenderer provides a consistent interface for turning the mdansi AST into
output text and the plumbing for writing that text to paths and streams.

"""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Iterable, Union

from mdansi.ast import Document
from mdansi.exceptions import InvalidOptionsError
from mdansi.options.base import BaseRendererOptions

OutputTarget = Union[str, Path, IO[bytes], IO[str]]


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options or BaseRendererOptions()

    @abstractmethod
    def iter_render(self, doc: Document) -> Iterable[str]:
        """Yield the rendered document piece by piece, in document order.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        """

    def render(self, doc: Document, output: OutputTarget) -> None:
        """Render the AST and write it to ``output``.

        Pieces are written as soon as they are produced, in document order.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination: a file path or a text/binary file-like object

        Raises
        ------
        RenderingError
            If rendering fails
        IOError
            If output cannot be written

        """
        self.write_text_output(self.iter_render(doc), output)

    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document as a string

        """
        return "".join(self.iter_render(doc))

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(pieces: Iterable[str], output: OutputTarget) -> None:
        """Write text pieces sequentially to a file path or IO stream.

        Parameters
        ----------
        pieces : iterable of str
            Rendered text, in order
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        Raises
        ------
        TypeError
            If output type is not supported

        """
        if isinstance(output, (str, Path)):
            with open(output, "w", encoding="utf-8") as handle:
                for piece in pieces:
                    handle.write(piece)
            return

        if isinstance(output, io.TextIOBase) or getattr(output, "encoding", None) is not None:
            for piece in pieces:
                output.write(piece)  # type: ignore[arg-type]
            return

        if hasattr(output, "write"):
            for piece in pieces:
                output.write(piece.encode("utf-8"))  # type: ignore[arg-type]
            return

        raise TypeError(f"Unsupported output type: {type(output).__name__}")
