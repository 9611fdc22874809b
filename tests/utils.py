"""Test utilities for the minigrep test suite.

Helpers for building directory trees on disk and for inspecting rendered
output.
"""

import os
import re
from pathlib import Path
from typing import Mapping

import pytest

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")

# Not valid UTF-8: a lone continuation byte and an invalid start byte
INVALID_UTF8 = b"needle \x80\xff needle\n"


def build_tree(root: Path, layout: Mapping[str, str | bytes | None]) -> Path:
    """Create files and directories below ``root``.

    Keys are POSIX-style relative paths. A key ending in ``/`` (or a None
    value) creates a directory; ``str`` values are written as UTF-8 text and
    ``bytes`` values are written verbatim.
    """
    for relative, content in layout.items():
        target = root / relative.rstrip("/")
        if relative.endswith("/") or content is None:
            target.mkdir(parents=True, exist_ok=True)
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(content, encoding="utf-8")
    return root


def make_symlink(link: Path, target: Path, target_is_directory: bool = False) -> None:
    """Create a symlink or skip the calling test where symlinks are unavailable."""
    try:
        os.symlink(target, link, target_is_directory=target_is_directory)
    except (OSError, NotImplementedError) as exc:
        pytest.skip(f"symlinks not supported here: {exc}")


def strip_ansi(text: str) -> str:
    """Remove ANSI SGR escape sequences from ``text``."""
    return ANSI_ESCAPE_RE.sub("", text)
