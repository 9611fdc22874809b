#  Copyright (c) 2025 Tom Villani, Ph.D.
"""minigrep - recursive content search with highlighted, numbered output.

minigrep walks a file or directory tree in parallel, finds every occurrence of
a literal or regular-expression pattern in each readable text file, and renders
the matching lines with optional zero-padded line numbers and ANSI highlights.

Key Features
------------
- Literal search that reports self-overlapping occurrences
- Regular-expression search with leftmost, non-overlapping matches
- Case-insensitive matching that keeps offsets aligned with the original text
- Parallel directory traversal on a bounded thread pool; symlinks never followed
- Files that cannot be read or decoded are skipped, never fatal

Examples
--------
Search a tree and print the results:

    >>> from minigrep import SearchConfig, search_and_render
    >>> exit_code = search_and_render(SearchConfig("fn ", "src"))

Work with results directly:

    >>> from minigrep import compile_pattern, search_path
    >>> pattern = compile_pattern("TODO")
    >>> for entry in search_path(pattern, "src"):
    ...     print(entry.display_name, [m.line_number for m in entry.matches])

"""

from __future__ import annotations

from minigrep.api import SearchConfig, resolve_exit_code, search_and_render, search_path
from minigrep.exceptions import (
    DecodeError,
    FileAccessError,
    FileError,
    MinigrepError,
    PatternError,
    ValidationError,
)
from minigrep.options import OutputOptions, SearchOptions
from minigrep.progress import SearchEvent, SearchEventCallback
from minigrep.renderers.text import colorize_ranges, format_line, render_matches
from minigrep.search import (
    CompiledPattern,
    DirectoryWalker,
    FileMatches,
    MatchedLine,
    PatternKind,
    SearchQuery,
    compile_pattern,
    merge_ranges,
    scan_line,
    search_text,
)

__version__ = "0.1.0"

__all__ = [
    "CompiledPattern",
    "DecodeError",
    "DirectoryWalker",
    "FileAccessError",
    "FileError",
    "FileMatches",
    "MatchedLine",
    "MinigrepError",
    "OutputOptions",
    "PatternError",
    "PatternKind",
    "SearchConfig",
    "SearchEvent",
    "SearchEventCallback",
    "SearchOptions",
    "SearchQuery",
    "ValidationError",
    "colorize_ranges",
    "compile_pattern",
    "format_line",
    "merge_ranges",
    "render_matches",
    "resolve_exit_code",
    "scan_line",
    "search_and_render",
    "search_path",
    "search_text",
]
