#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Per-line occurrence scanning.

Literal patterns report every occurrence, including ones that overlap
themselves (``"aa"`` occurs at 0 and 1 in ``"aaa"``). Regular expressions use
the engine's leftmost non-overlapping iteration. All offsets are character
offsets into the original, unfolded line.
"""

from __future__ import annotations

from typing import Callable

from minigrep.search.pattern import CompiledPattern, PatternKind, fold_case
from minigrep.search.types import MatchedLine, Span


def _literal_spans(line: str, pattern: CompiledPattern) -> list[Span]:
    needle = pattern.needle
    if not needle:
        return []

    haystack = fold_case(line) if pattern.case_insensitive else line
    needle_len = len(needle)
    spans: list[Span] = []
    cursor = 0
    while True:
        idx = haystack.find(needle, cursor)
        if idx == -1:
            break
        spans.append((idx, idx + needle_len))
        # Resume one past the start, not the end, so self-overlaps are found
        cursor = idx + 1
    return spans


def _regex_spans(line: str, pattern: CompiledPattern) -> list[Span]:
    if pattern.regex is None:
        return []

    spans: list[Span] = []
    for match in pattern.regex.finditer(line):
        start, end = match.span()
        if start == end:
            continue
        spans.append((start, end))
    return spans


_STRATEGIES: dict[PatternKind, Callable[[str, CompiledPattern], list[Span]]] = {
    PatternKind.LITERAL: _literal_spans,
    PatternKind.REGEX: _regex_spans,
}


def find_spans(line: str, pattern: CompiledPattern) -> list[Span]:
    """Return the ``(start, end)`` span of every occurrence on ``line``, left to right."""
    return _STRATEGIES[pattern.kind](line, pattern)


def scan_line(line: str, pattern: CompiledPattern) -> list[int]:
    """Return the start offset of every occurrence on ``line``, left to right."""
    return [start for start, _ in find_spans(line, pattern)]


def split_lines(text: str) -> list[str]:
    r"""Split text into lines on ``\n``, dropping a trailing ``\r`` from each.

    Unlike ``str.splitlines`` this does not break on form feeds or other
    Unicode separators, so line numbers agree with other line-oriented tools.
    A final newline does not produce an extra empty line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def search_text(text: str, pattern: CompiledPattern) -> list[MatchedLine]:
    """Scan every line of ``text`` and collect the lines that match.

    Parameters
    ----------
    text : str
        Full decoded content of one file
    pattern : CompiledPattern
        Pattern to scan for

    Returns
    -------
    list[MatchedLine]
        Matching lines in file order with 1-based line numbers. Empty when
        nothing matched or the pattern matches nothing.

    """
    if pattern.matches_nothing:
        return []

    matched: list[MatchedLine] = []
    for line_number, line in enumerate(split_lines(text), start=1):
        spans = find_spans(line, pattern)
        if spans:
            matched.append(MatchedLine(line=line, line_number=line_number, spans=tuple(spans)))
    return matched
