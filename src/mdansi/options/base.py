#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for renderer options.

This module defines the foundation classes for the renderer options used by
mdansi.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    strict : bool, default=False
        Whether recoverable rendering problems (documents nested deeper than
        allowed) raise a RenderingError. If False (default), the problem is
        logged, recorded as a diagnostic, and rendering continues.

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen dataclass fields.

    """

    strict: bool = field(
        default=False,
        metadata={"help": "Raise RenderingError on recoverable problems instead of logging and continuing"},
    )

    def __post_init__(self) -> None:
        """Validate base renderer options."""
        pass
