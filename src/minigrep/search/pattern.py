#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Query normalization into a matchable pattern.

A query compiles once per search into a ``CompiledPattern``: either a literal
needle (case-folded up front when matching case-insensitively) or a compiled
regular expression. The compiled pattern is immutable and is shared read-only
by every walker thread.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum, auto

from minigrep.exceptions import PatternError
from minigrep.options.search import SearchOptions
from minigrep.search.types import SearchQuery

logger = logging.getLogger(__name__)


class PatternKind(Enum):
    """Enumerate the supported matching strategies."""

    LITERAL = auto()
    REGEX = auto()


@dataclass(frozen=True)
class CompiledPattern:
    """Normalized, ready-to-scan form of a query.

    Parameters
    ----------
    kind : PatternKind
        Matching strategy selected at compile time
    source : str
        Query text exactly as supplied
    case_insensitive : bool
        Whether matching ignores case
    needle : str
        Literal to search for, already folded when ``case_insensitive``.
        Empty for regular expressions
    regex : re.Pattern or None
        Compiled expression for ``PatternKind.REGEX``

    """

    kind: PatternKind
    source: str
    case_insensitive: bool = False
    needle: str = ""
    regex: re.Pattern[str] | None = None

    @property
    def matches_nothing(self) -> bool:
        """Return True when scanning can never report an occurrence."""
        return self.kind is PatternKind.LITERAL and not self.needle


def fold_case(text: str) -> str:
    """Lowercase ``text`` one character at a time without changing its length.

    Each character folds on its own: whole-string ``str.lower`` is context
    sensitive (a word-final ``"Σ"`` becomes ``"ς"``, elsewhere ``"σ"``), so the
    same letter could fold differently in the needle and in the line.
    Characters whose lowercase form is more than one code point
    (``"İ".lower()``) are kept unchanged so offsets in the folded text always
    equal offsets in the original.
    """
    chars: list[str] = []
    for char in text:
        lowered = char.lower()
        chars.append(lowered if len(lowered) == 1 else char)
    return "".join(chars)


def compile_pattern(query: str | SearchQuery, options: SearchOptions | None = None) -> CompiledPattern:
    """Compile a query into a ``CompiledPattern``.

    Parameters
    ----------
    query : str or SearchQuery
        Raw query text, or a ``SearchQuery`` carrying its own flags
    options : SearchOptions, optional
        Flags used when ``query`` is a plain string

    Returns
    -------
    CompiledPattern
        Literal or regular-expression pattern

    Raises
    ------
    PatternError
        If regular-expression matching is requested and the query is not a
        valid expression

    """
    if isinstance(query, SearchQuery):
        raw_text, case_insensitive, use_regex = query.raw_text, query.case_insensitive, query.use_regex
    else:
        options = options or SearchOptions()
        raw_text, case_insensitive, use_regex = query, options.case_insensitive, options.use_regex

    if use_regex:
        flags = re.IGNORECASE if case_insensitive else 0
        try:
            regex = re.compile(raw_text, flags)
        except re.error as exc:
            raise PatternError(raw_text, original_error=exc) from exc
        logger.debug("Compiled regular expression %r (ignore case: %s)", raw_text, case_insensitive)
        return CompiledPattern(kind=PatternKind.REGEX, source=raw_text, case_insensitive=case_insensitive, regex=regex)

    needle = fold_case(raw_text) if case_insensitive else raw_text
    return CompiledPattern(kind=PatternKind.LITERAL, source=raw_text, case_insensitive=case_insensitive, needle=needle)
