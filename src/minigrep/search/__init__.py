"""Search subsystem: pattern compilation, line scanning, range merging and traversal."""

from __future__ import annotations

from minigrep.search.pattern import CompiledPattern, PatternKind, compile_pattern, fold_case
from minigrep.search.ranges import merge_ranges
from minigrep.search.scanner import find_spans, scan_line, search_text, split_lines
from minigrep.search.types import FileMatches, MatchedLine, SearchQuery, Span, display_path
from minigrep.search.walker import DirectoryWalker, search_content

__all__ = [
    "CompiledPattern",
    "DirectoryWalker",
    "FileMatches",
    "MatchedLine",
    "PatternKind",
    "SearchQuery",
    "Span",
    "compile_pattern",
    "display_path",
    "find_spans",
    "fold_case",
    "merge_ranges",
    "scan_line",
    "search_content",
    "search_text",
    "split_lines",
]
