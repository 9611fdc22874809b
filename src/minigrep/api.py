#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Public search entry points: compile, walk, render and decide the exit status."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Sequence, TextIO

from minigrep.constants import EXIT_NO_MATCH, EXIT_SUCCESS, MATCH_COUNT_TEMPLATE, STDIN_PATH
from minigrep.exceptions import DecodeError
from minigrep.options.search import OutputOptions, SearchOptions
from minigrep.progress import SearchEvent, SearchEventCallback
from minigrep.renderers.text import count_matched_lines, format_file_header, format_line, render_matches
from minigrep.search.pattern import CompiledPattern, compile_pattern
from minigrep.search.types import FileMatches, SearchQuery
from minigrep.search.walker import DirectoryWalker, search_content

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchConfig:
    """Everything one search invocation needs.

    Parameters
    ----------
    query : str
        Pattern text
    path : str or Path, default "-"
        Root file or directory; ``"-"`` reads standard input
    search : SearchOptions
        Matching and traversal options
    output : OutputOptions
        Rendering options and exit policy

    """

    query: str
    path: str | Path = STDIN_PATH
    search: SearchOptions = field(default_factory=SearchOptions)
    output: OutputOptions = field(default_factory=OutputOptions)

    def to_query(self) -> SearchQuery:
        """Return the immutable query shared with the walker threads."""
        return SearchQuery(
            raw_text=self.query,
            case_insensitive=self.search.case_insensitive,
            use_regex=self.search.use_regex,
        )


def search_path(
    pattern: CompiledPattern,
    path: str | os.PathLike[str],
    options: SearchOptions | None = None,
    *,
    stdin: BinaryIO | None = None,
    progress_callback: SearchEventCallback | None = None,
) -> list[FileMatches]:
    """Search a file, a directory tree, or standard input.

    Parameters
    ----------
    pattern : CompiledPattern
        Compiled query
    path : str or PathLike
        Root path, or ``"-"`` for standard input
    options : SearchOptions, optional
        Worker count and encoding
    stdin : BinaryIO, optional
        Binary stream read instead of ``sys.stdin.buffer``
    progress_callback : SearchEventCallback, optional
        Receives walk events

    Returns
    -------
    list[FileMatches]
        One entry per file with at least one match, in no particular order

    """
    options = options or SearchOptions()
    if os.fspath(path) == STDIN_PATH:
        return _search_stdin(pattern, options, stdin=stdin, progress_callback=progress_callback)

    walker = DirectoryWalker(
        pattern,
        max_workers=options.max_workers,
        encoding=options.encoding,
        progress_callback=progress_callback,
    )
    return walker.walk(path)


def _search_stdin(
    pattern: CompiledPattern,
    options: SearchOptions,
    *,
    stdin: BinaryIO | None,
    progress_callback: SearchEventCallback | None,
) -> list[FileMatches]:
    stream = stdin if stdin is not None else sys.stdin.buffer
    data = stream.read()
    try:
        file_matches = search_content(data, STDIN_PATH, pattern, options.encoding)
    except DecodeError as exc:
        if progress_callback is not None:
            progress_callback(
                SearchEvent("skipped", exc.message, path=STDIN_PATH, metadata={"reason": "decode", "error": exc})
            )
        return []
    return [file_matches] if file_matches is not None else []


def resolve_exit_code(found: bool, options: OutputOptions) -> int:
    """Map "did anything match" onto an exit status according to the exit policy."""
    policy = options.exit_policy
    if policy == "auto":
        policy = "discovery" if options.quiet else "display"
    if policy == "display":
        return EXIT_SUCCESS
    return EXIT_SUCCESS if found else EXIT_NO_MATCH


def write_lines(lines: Sequence[str], stream: TextIO | None = None) -> None:
    """Write rendered lines to ``stream`` (``sys.stdout`` by default)."""
    stream = stream if stream is not None else sys.stdout
    for line in lines:
        print(line, file=stream)


def write_rich(file_matches: Sequence[FileMatches], options: OutputOptions, stream: TextIO | None = None) -> None:
    """Write results through a rich console, styling each file header."""
    from rich.console import Console
    from rich.text import Text

    console = Console(file=stream if stream is not None else sys.stdout, highlight=False, soft_wrap=True)
    for entry in file_matches:
        console.print(Text(format_file_header(entry), style="bold magenta"))
        for matched in entry.matches:
            # ANSI highlight markers become rich styles
            console.print(Text.from_ansi(format_line(matched, options)))

    if options.show_count:
        console.print(Text(MATCH_COUNT_TEMPLATE.format(count=count_matched_lines(file_matches)), style="dim"))


def search_and_render(
    config: SearchConfig,
    *,
    stdin: BinaryIO | None = None,
    stream: TextIO | None = None,
    progress_callback: SearchEventCallback | None = None,
) -> int:
    """Run one complete search and print its results.

    Parameters
    ----------
    config : SearchConfig
        Query, root path and options
    stdin : BinaryIO, optional
        Replacement for standard input when ``config.path`` is ``"-"``
    stream : TextIO, optional
        Output stream, ``sys.stdout`` by default
    progress_callback : SearchEventCallback, optional
        Receives walk events, including skipped paths

    Returns
    -------
    int
        ``EXIT_SUCCESS`` or ``EXIT_NO_MATCH`` as decided by
        ``config.output.exit_policy``

    Raises
    ------
    PatternError
        If the query is not a valid regular expression. Raised before any
        path is visited.

    """
    pattern = compile_pattern(config.to_query())
    results = search_path(
        pattern,
        config.path,
        config.search,
        stdin=stdin,
        progress_callback=progress_callback,
    )
    logger.debug("Search for %r found matches in %d file(s)", config.query, len(results))

    if config.output.sort_files:
        results = sorted(results, key=lambda entry: str(entry.path))

    if config.output.rich and not config.output.quiet:
        write_rich(results, config.output, stream)
    else:
        write_lines(render_matches(results, config.output), stream)
    return resolve_exit_code(bool(results), config.output)
