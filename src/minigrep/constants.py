#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for minigrep.

This module centralizes the fixed markers, sentinels and defaults used across
the search core, the text renderer and the command-line layer.
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

ExitPolicy = Literal["auto", "discovery", "display"]
SkipReason = Literal["metadata", "symlink", "listing", "read", "decode", "special"]

# =============================================================================
# Input Handling
# =============================================================================

# Path argument that selects standard input instead of the filesystem
STDIN_PATH = "-"

# Name shown in the per-file header for standard input
STDIN_DISPLAY_NAME = "(standard input)"

DEFAULT_ENCODING = "utf-8"

# =============================================================================
# Output Formatting
# =============================================================================

ANSI_RED = "\x1b[31m"
ANSI_RESET = "\x1b[0m"

DEFAULT_LINE_NUMBER_WIDTH = 4
LINE_NUMBER_SEPARATOR = "] "

FILE_HEADER_TEMPLATE = "-- {name} --"
MATCH_COUNT_TEMPLATE = "Number of matches: {count}"

DEFAULT_EXIT_POLICY: ExitPolicy = "auto"

# =============================================================================
# Exit Codes
# =============================================================================

EXIT_SUCCESS = 0
EXIT_NO_MATCH = 1
EXIT_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4

# =============================================================================
# Benchmarking
# =============================================================================

DEFAULT_BENCH_ITERATIONS = 10
