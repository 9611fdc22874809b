"""Simple timing harness behind ``minigrep --bench``."""

from __future__ import annotations

import io
import logging
import sys
import time
from dataclasses import dataclass
from typing import BinaryIO, TextIO

from minigrep.api import SearchConfig, search_path
from minigrep.constants import STDIN_PATH
from minigrep.renderers.text import count_matched_lines
from minigrep.search.pattern import compile_pattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchResult:
    """Timing summary of repeated searches."""

    iterations: int
    elapsed: float
    total_matches: int

    @property
    def average(self) -> float:
        return self.elapsed / self.iterations if self.iterations else 0.0


def run_bench(config: SearchConfig, iterations: int, *, stdin: BinaryIO | None = None) -> BenchResult:
    """Compile once and run the search ``iterations`` times.

    Standard input is read once and replayed for every iteration.
    """
    pattern = compile_pattern(config.to_query())

    replay: bytes | None = None
    if str(config.path) == STDIN_PATH:
        replay = (stdin if stdin is not None else sys.stdin.buffer).read()

    total_matches = 0
    start = time.perf_counter()
    for _ in range(iterations):
        source = io.BytesIO(replay) if replay is not None else None
        results = search_path(pattern, config.path, config.search, stdin=source)
        total_matches += count_matched_lines(results)
    elapsed = time.perf_counter() - start

    logger.debug("Benchmark finished: %d iterations in %.4fs", iterations, elapsed)
    return BenchResult(iterations=iterations, elapsed=elapsed, total_matches=total_matches)


def format_bench_result(config: SearchConfig, result: BenchResult) -> str:
    return (
        f"Searched '{config.query}' in '{config.path}' {result.iterations} times in {result.elapsed:.2f}s "
        f"(avg: {result.average * 1000:.2f}ms per run, total matches: {result.total_matches})"
    )


def print_bench_result(config: SearchConfig, result: BenchResult, stream: TextIO | None = None) -> None:
    print(format_bench_result(config, result), file=stream if stream is not None else sys.stdout)
