#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for minigrep.

Examples
--------
Search a directory tree::

    $ minigrep "fn " src

Case-insensitive regular expression with a match count::

    $ minigrep -i -e "todo|fixme" . --count

Read standard input::

    $ cat notes.txt | minigrep needle

Use only the exit status::

    $ minigrep -q needle src && echo found

Defaults can be stored in ``.minigrep.toml`` (or ``.yaml``/``.json``, or a
``[tool.minigrep]`` table in pyproject.toml), or in the file named by the
``MINIGREP_CONFIG`` environment variable. Command-line flags always win.

"""

import argparse
import logging
import os
import sys
from typing import Any, Dict

from minigrep.api import SearchConfig, search_and_render
from minigrep.cli.bench import print_bench_result, run_bench
from minigrep.cli.builder import (
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    OPTION_DESTINATIONS,
    create_parser,
    get_exit_code_for_exception,
)
from minigrep.cli.config import CONFIG_ENV_VAR, build_options, load_config_with_priority, merge_configs
from minigrep.constants import STDIN_PATH
from minigrep.exceptions import FileAccessError, MinigrepError
from minigrep.logging_utils import configure_logging
from minigrep.progress import SearchEvent, SearchEventCallback
from minigrep.search.types import display_path

logger = logging.getLogger(__name__)

# Access failures log at INFO, other skips at DEBUG
_NOTABLE_SKIP_REASONS = {"metadata", "listing", "read"}


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments."""
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level.upper())
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _make_event_logger() -> SearchEventCallback:
    def callback(event: SearchEvent) -> None:
        if event.event_type == "skipped":
            reason = event.metadata.get("reason")
            level = logging.INFO if reason in _NOTABLE_SKIP_REASONS else logging.DEBUG
            logger.log(level, "Skipped %s (%s): %s", display_path(event.path), reason, event.message)
        elif event.event_type == "item_done":
            logger.debug("%s: %d matching line(s)", display_path(event.path), event.current)
        else:
            logger.debug("%s", event.message)

    return callback


def _collect_overrides(parsed_args: argparse.Namespace) -> Dict[str, Dict[str, Any]]:
    """Group the flags the user passed into ``search``/``output`` config tables."""
    overrides: Dict[str, Dict[str, Any]] = {}
    for dest, (section, field_name) in OPTION_DESTINATIONS.items():
        value = getattr(parsed_args, dest, None)
        if value is not None:
            overrides.setdefault(section, {})[field_name] = value
    return overrides


def _build_search_config(parsed_args: argparse.Namespace) -> SearchConfig:
    """Merge configuration files with command-line flags.

    Raises
    ------
    argparse.ArgumentTypeError
        If a configuration file cannot be loaded
    ValueError, TypeError
        If a configured or passed value is invalid

    """
    config_data: Dict[str, Any] = {}
    if not parsed_args.no_config:
        config_data = load_config_with_priority(
            explicit_path=parsed_args.config,
            env_var_path=os.environ.get(CONFIG_ENV_VAR),
        )
    merged = merge_configs(config_data, _collect_overrides(parsed_args))
    search_options, output_options = build_options(merged)
    return SearchConfig(query=parsed_args.query, path=parsed_args.path, search=search_options, output=output_options)


def main(args: list[str] | None = None) -> int:
    """Execute the minigrep command line and return its exit status."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        config = _build_search_config(parsed_args)
    except argparse.ArgumentTypeError as exc:
        print(f"Error loading configuration: {exc}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except (TypeError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return get_exit_code_for_exception(exc)

    try:
        if parsed_args.path != STDIN_PATH and not os.path.lexists(parsed_args.path):
            raise FileAccessError(parsed_args.path, message=f"Path does not exist: {parsed_args.path}")
        if parsed_args.bench:
            result = run_bench(config, parsed_args.bench_iterations)
            print_bench_result(config, result)
            return EXIT_SUCCESS
        return search_and_render(config, progress_callback=_make_event_logger())
    except MinigrepError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return get_exit_code_for_exception(exc)


__all__ = ["main"]
