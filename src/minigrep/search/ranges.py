"""Interval merging for highlight rendering."""

from __future__ import annotations

from typing import Iterable

from minigrep.search.types import Span


def merge_ranges(spans: Iterable[Span]) -> list[Span]:
    """Collapse spans into sorted, non-overlapping, non-adjacent spans.

    Spans that overlap or touch (``next.start <= current.end``) are joined,
    so ``[(0, 2), (2, 5)]`` becomes ``[(0, 5)]``.

    Parameters
    ----------
    spans : Iterable[Span]
        Half-open ``(start, end)`` ranges in any order

    Returns
    -------
    list[Span]
        Merged ranges sorted by start; empty for empty input

    """
    ordered = sorted(spans, key=lambda span: span[0])
    if not ordered:
        return []

    merged: list[Span] = []
    current_start, current_end = ordered[0]
    for start, end in ordered[1:]:
        if start <= current_end:
            current_end = max(current_end, end)
        else:
            merged.append((current_start, current_end))
            current_start, current_end = start, end
    merged.append((current_start, current_end))
    return merged
