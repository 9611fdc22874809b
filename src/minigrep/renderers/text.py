#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Plain-text rendering of search results.

Highlighting is built left to right into a fresh list of slices from merged
spans, so inserting markers never invalidates the offsets still to be used.
"""

from __future__ import annotations

from typing import Sequence

from minigrep.constants import (
    ANSI_RED,
    ANSI_RESET,
    FILE_HEADER_TEMPLATE,
    LINE_NUMBER_SEPARATOR,
    MATCH_COUNT_TEMPLATE,
)
from minigrep.options.search import OutputOptions
from minigrep.search.ranges import merge_ranges
from minigrep.search.types import FileMatches, MatchedLine, Span


def colorize_ranges(
    line: str,
    ranges: Sequence[Span],
    *,
    start_marker: str = ANSI_RED,
    end_marker: str = ANSI_RESET,
) -> str:
    """Wrap each range of ``line`` in highlight markers.

    Parameters
    ----------
    line : str
        Original line text
    ranges : Sequence[Span]
        Sorted, non-overlapping character ranges (see ``merge_ranges``).
        Ranges are clamped to the line
    start_marker : str, default ANSI red
        Text inserted before each range
    end_marker : str, default ANSI reset
        Text inserted after each range

    Returns
    -------
    str
        Highlighted line

    """
    if not ranges:
        return line

    length = len(line)
    parts: list[str] = []
    cursor = 0
    for start, end in ranges:
        start = min(max(start, cursor), length)
        end = min(max(end, start), length)
        if start == end:
            continue
        parts.append(line[cursor:start])
        parts.append(start_marker)
        parts.append(line[start:end])
        parts.append(end_marker)
        cursor = end
    parts.append(line[cursor:])
    return "".join(parts)


def format_line(matched: MatchedLine, options: OutputOptions) -> str:
    """Render one matched line with optional highlight and line-number label."""
    merged = merge_ranges(matched.spans)
    line = colorize_ranges(matched.line, merged) if options.color else matched.line

    if options.show_line_numbers:
        line = f"{matched.line_number:0{options.line_number_width}d}{LINE_NUMBER_SEPARATOR}{line}"
    return line


def format_file_header(file_matches: FileMatches) -> str:
    """Return the header line that introduces one file's matches."""
    return FILE_HEADER_TEMPLATE.format(name=file_matches.display_name)


def render_matches(file_matches: Sequence[FileMatches], options: OutputOptions) -> list[str]:
    """Render all results as display lines.

    Parameters
    ----------
    file_matches : Sequence[FileMatches]
        Results grouped per file
    options : OutputOptions
        Rendering toggles

    Returns
    -------
    list[str]
        Header and match lines per file, followed by the match-count summary
        when ``show_count`` is set. Empty in quiet mode.

    """
    if options.quiet:
        return []

    lines: list[str] = []
    count = 0
    for entry in file_matches:
        lines.append(format_file_header(entry))
        for matched in entry.matches:
            lines.append(format_line(matched, options))
            count += 1

    if options.show_count:
        lines.append(MATCH_COUNT_TEMPLATE.format(count=count))
    return lines


def count_matched_lines(file_matches: Sequence[FileMatches]) -> int:
    """Return the number of matched lines across all files."""
    return sum(len(entry.matches) for entry in file_matches)
