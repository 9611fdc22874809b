"""Configuration options for searching and rendering."""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field

from minigrep.constants import DEFAULT_ENCODING, DEFAULT_EXIT_POLICY, DEFAULT_LINE_NUMBER_WIDTH, ExitPolicy
from minigrep.options.base import CloneFrozenMixin

_EXIT_POLICIES = ("auto", "discovery", "display")


@dataclass(frozen=True)
class SearchOptions(CloneFrozenMixin):
    """Matching and traversal toggles shared read-only by every worker."""

    case_insensitive: bool = field(
        default=False,
        metadata={
            "help": "Fold case before comparing literal patterns; IGNORECASE for regular expressions",
        },
    )
    use_regex: bool = field(
        default=False,
        metadata={
            "help": "Interpret the query as a regular expression",
        },
    )
    max_workers: int | None = field(
        default=None,
        metadata={
            "help": "Size of the directory walker's thread pool; the executor default when unset",
        },
    )
    encoding: str = field(
        default=DEFAULT_ENCODING,
        metadata={
            "help": "Text encoding used to decode files; files that fail to decode are skipped",
        },
    )

    def __post_init__(self) -> None:
        """Validate worker count and encoding at construction time."""
        if self.max_workers is not None and self.max_workers <= 0:
            raise ValueError(f"max_workers must be positive, got {self.max_workers}")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {self.encoding!r}") from exc


@dataclass(frozen=True)
class OutputOptions(CloneFrozenMixin):
    """Rendering toggles and the exit-status policy."""

    color: bool = field(
        default=True,
        metadata={
            "help": "Highlight matches with ANSI red",
        },
    )
    show_line_numbers: bool = field(
        default=True,
        metadata={
            "help": "Prefix each matching line with its zero-padded 1-based line number",
        },
    )
    quiet: bool = field(
        default=False,
        metadata={
            "help": "Print nothing; report whether anything matched through the exit status only",
        },
    )
    show_count: bool = field(
        default=False,
        metadata={
            "help": "Print the total number of matching lines after all results",
        },
    )
    line_number_width: int = field(
        default=DEFAULT_LINE_NUMBER_WIDTH,
        metadata={
            "help": "Minimum width of the zero-padded line number label",
        },
    )
    exit_policy: ExitPolicy = field(
        default=DEFAULT_EXIT_POLICY,
        metadata={
            "help": "Exit status policy: 'discovery' fails when nothing matched, 'display' always succeeds, "
            "'auto' uses discovery in quiet mode and display otherwise",
            "choices": list(_EXIT_POLICIES),
        },
    )
    sort_files: bool = field(
        default=True,
        metadata={
            "help": "Order file groups by path instead of walker completion order",
        },
    )
    rich: bool = field(
        default=False,
        metadata={
            "help": "Write output through a rich console",
        },
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges and choices at construction time."""
        if self.line_number_width < 1:
            raise ValueError(f"line_number_width must be at least 1, got {self.line_number_width}")
        if self.exit_policy not in _EXIT_POLICIES:
            raise ValueError(f"exit_policy must be one of {', '.join(_EXIT_POLICIES)}, got {self.exit_policy!r}")


__all__ = ["OutputOptions", "SearchOptions"]
