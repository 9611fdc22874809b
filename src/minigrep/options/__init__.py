#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for minigrep searches.

Options are frozen dataclasses. Use ``create_updated`` to derive a modified
copy, e.g. ``SearchOptions().create_updated(use_regex=True)``.
"""

from __future__ import annotations

from minigrep.options.base import CloneFrozenMixin
from minigrep.options.search import OutputOptions, SearchOptions

__all__ = ["CloneFrozenMixin", "OutputOptions", "SearchOptions"]
