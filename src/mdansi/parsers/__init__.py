#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers that build the mdansi AST from source text."""

from mdansi.parsers.markdown import MarkdownTokenizer, tokenize

__all__ = ["MarkdownTokenizer", "tokenize"]
