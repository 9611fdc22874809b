"""Pytest configuration and shared fixtures for the minigrep test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
from pathlib import Path
from typing import Generator

import pytest
from utils import build_tree

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    import os

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests")


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    """Remove handlers installed by ``configure_logging`` during a test."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    try:
        yield
    finally:
        for handler in list(root_logger.handlers):
            if handler not in handlers:
                root_logger.removeHandler(handler)
                handler.close()
        root_logger.setLevel(level)


@pytest.fixture
def code_tree(tmp_path: Path) -> Path:
    """Provide a small source tree with matches at several depths.

    Layout::

        main.rs             "fn " on lines 1 and 3
        README.md           no match
        src/lib.rs          "fn " on line 2
        src/empty/          empty directory
        src/util/notes.txt  no match

    """
    build_tree(
        tmp_path,
        {
            "main.rs": "fn main() {\n  let x = 1;\nfn helper() {}\n",
            "README.md": "A project without functions.\n",
            "src/lib.rs": "// library\nfn exported() {}\n",
            "src/empty/": None,
            "src/util/notes.txt": "nothing to see here\n",
        },
    )
    return tmp_path


@pytest.fixture
def fn_file(tmp_path: Path) -> Path:
    """Provide a single file holding the three-line ``fn`` example."""
    path = tmp_path / "example.rs"
    path.write_text("fn main() {\n  let x = 1;\nfn helper() {}\n", encoding="utf-8")
    return path
