"""Shared data structures for the search subsystem."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from minigrep.constants import STDIN_DISPLAY_NAME, STDIN_PATH

# Half-open [start, end) range of character offsets within one line
Span = Tuple[int, int]


@dataclass(frozen=True)
class SearchQuery:
    """Raw query text plus the flags that decide how it is compiled."""

    raw_text: str
    case_insensitive: bool = False
    use_regex: bool = False


@dataclass(frozen=True)
class MatchedLine:
    """One line containing at least one occurrence of the pattern.

    The line text is copied out of the file buffer so results outlive it.
    ``spans`` are in scan order with strictly increasing starts.
    """

    line: str
    line_number: int
    spans: tuple[Span, ...]

    def __post_init__(self) -> None:
        """Reject empty or out-of-range occurrence lists."""
        if not self.spans:
            raise ValueError("MatchedLine requires at least one occurrence")
        if self.line_number < 1:
            raise ValueError(f"line_number is 1-based, got {self.line_number}")
        previous = -1
        for start, end in self.spans:
            if start <= previous:
                raise ValueError("occurrence offsets must be strictly increasing")
            if start < 0 or end > len(self.line) or end < start:
                raise ValueError(f"span ({start}, {end}) lies outside a line of length {len(self.line)}")
            previous = start

    @property
    def locations(self) -> list[int]:
        """Return the occurrence start offsets."""
        return [start for start, _ in self.spans]


@dataclass(frozen=True)
class FileMatches:
    """All matched lines of one file, in file order."""

    path: Path | str
    matches: tuple[MatchedLine, ...]

    def __post_init__(self) -> None:
        """Files without matches are represented by absence, not an empty entry."""
        if not self.matches:
            raise ValueError(f"FileMatches for {self.path} requires at least one matched line")

    @property
    def display_name(self) -> str:
        """Return the header name, using the sentinel for standard input."""
        if str(self.path) == STDIN_PATH:
            return STDIN_DISPLAY_NAME
        return display_path(self.path)


def display_path(path: Path | str) -> str:
    """Return ``path`` as printable text.

    Names that are not valid in the filesystem encoding come back from the OS
    with surrogate escapes, which no text stream can encode. Those bytes are
    shown as U+FFFD replacement characters instead.

    Examples
    --------
    >>> display_path("src/main.rs")
    'src/main.rs'

    """
    name = Path(path).as_posix() if isinstance(path, Path) else str(path)
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return os.fsencode(name).decode("utf-8", "replace")
    return name
