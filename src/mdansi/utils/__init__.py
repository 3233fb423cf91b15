#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility modules for mdansi: ANSI styles, wrapping and terminal probing."""
