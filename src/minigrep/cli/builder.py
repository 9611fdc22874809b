#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Argument parser construction and exit-code mapping for the minigrep CLI."""

import argparse
from dataclasses import fields
from typing import Any, Mapping

from minigrep import __version__
from minigrep.constants import (
    DEFAULT_BENCH_ITERATIONS,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_NO_MATCH,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    STDIN_PATH,
)
from minigrep.exceptions import FileError, ValidationError
from minigrep.options import OutputOptions, SearchOptions

__all__ = [
    "EXIT_ERROR",
    "EXIT_FILE_ERROR",
    "EXIT_NO_MATCH",
    "EXIT_SUCCESS",
    "EXIT_VALIDATION_ERROR",
    "OPTION_DESTINATIONS",
    "create_parser",
    "get_exit_code_for_exception",
]

# Parser destination -> (config section, option field)
OPTION_DESTINATIONS: dict[str, tuple[str, str]] = {
    "case_insensitive": ("search", "case_insensitive"),
    "use_regex": ("search", "use_regex"),
    "max_workers": ("search", "max_workers"),
    "encoding": ("search", "encoding"),
    "color": ("output", "color"),
    "show_line_numbers": ("output", "show_line_numbers"),
    "quiet": ("output", "quiet"),
    "show_count": ("output", "show_count"),
    "exit_policy": ("output", "exit_policy"),
    "rich": ("output", "rich"),
}

_SECTION_OPTIONS = {"search": SearchOptions, "output": OutputOptions}


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from exc
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {number}")
    return number


def _option_metadata(dest: str) -> Mapping[str, Any]:
    """Return the dataclass field metadata behind a parser destination."""
    section, field_name = OPTION_DESTINATIONS[dest]
    for option_field in fields(_SECTION_OPTIONS[section]):
        if option_field.name == field_name:
            return option_field.metadata
    raise KeyError(f"{_SECTION_OPTIONS[section].__name__} has no field {field_name!r}")


def _add_option(group: argparse._ArgumentGroup, *flags: str, dest: str, **kwargs: Any) -> None:
    """Add a flag whose help text and choices come from its option field."""
    metadata = _option_metadata(dest)
    kwargs.setdefault("help", metadata["help"])
    if "choices" in metadata:
        kwargs.setdefault("choices", metadata["choices"])
    group.add_argument(*flags, dest=dest, **kwargs)


def create_parser() -> argparse.ArgumentParser:
    """Build the ``minigrep`` argument parser.

    Option flags default to None so that values from a configuration file
    are only overridden by flags the user actually passed. Boolean flags
    accept a ``--no-`` form to switch a configured value back off.
    """
    parser = argparse.ArgumentParser(
        prog="minigrep",
        description="Recursively search files for a literal or regular-expression pattern.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("query", help="Search query text or pattern")
    parser.add_argument(
        "path",
        nargs="?",
        default=STDIN_PATH,
        help="File or directory to search (use '-' for stdin)",
    )

    toggle: dict[str, Any] = {"action": argparse.BooleanOptionalAction, "default": None}

    matching = parser.add_argument_group("matching")
    _add_option(matching, "-i", "--case-insensitive", dest="case_insensitive", **toggle)
    _add_option(matching, "-e", "--regex", dest="use_regex", **toggle)
    _add_option(matching, "-j", "--jobs", dest="max_workers", type=_positive_int)
    _add_option(matching, "--encoding", dest="encoding")

    output = parser.add_argument_group("output")
    _add_option(output, "--color", dest="color", **toggle)
    _add_option(output, "--lines", dest="show_line_numbers", **toggle)
    _add_option(output, "-q", "--quiet", dest="quiet", **toggle)
    _add_option(output, "-c", "--count", dest="show_count", **toggle)
    _add_option(output, "--exit-policy", dest="exit_policy")
    _add_option(output, "--rich", dest="rich", **toggle)

    config = parser.add_argument_group("configuration")
    config.add_argument("--config", help="Configuration file overriding discovered defaults")
    config.add_argument("--no-config", action="store_true", help="Ignore configuration files")

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level; skipped paths are reported at INFO and DEBUG",
    )
    logging_group.add_argument("--log-file", help="Also write log messages to this file")
    logging_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and thread names")

    bench = parser.add_argument_group("benchmarking")
    bench.add_argument("--bench", action="store_true", help="Run a basic performance benchmark instead of printing")
    bench.add_argument(
        "--bench-iterations",
        type=_positive_int,
        default=DEFAULT_BENCH_ITERATIONS,
        help="Number of timed search runs for --bench",
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    # Invalid patterns, plus option values rejected while building options
    if isinstance(exception, (ValidationError, ValueError, TypeError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    return EXIT_ERROR
