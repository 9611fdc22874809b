"""Unit tests for the minigrep exception hierarchy."""

import re

import pytest

from minigrep.cli.builder import get_exit_code_for_exception
from minigrep.exceptions import (
    DecodeError,
    FileAccessError,
    FileError,
    MinigrepError,
    PatternError,
    ValidationError,
)


@pytest.mark.unit
class TestExceptionHierarchy:
    """Test exception attributes and inheritance."""

    def test_base_error(self):
        cause = RuntimeError("boom")
        error = MinigrepError("failed", original_error=cause)
        assert error.message == "failed"
        assert str(error) == "failed"
        assert error.original_error is cause

    def test_pattern_error_message_from_cause(self):
        try:
            re.compile("(")
        except re.error as exc:
            error = PatternError("(", original_error=exc)

        assert isinstance(error, ValidationError)
        assert error.pattern == "("
        assert error.parameter_name == "query"
        assert error.parameter_value == "("
        assert error.message.startswith("Invalid regular expression '('")

    def test_pattern_error_custom_message(self):
        assert PatternError("x", message="bad").message == "bad"

    def test_file_access_error(self):
        error = FileAccessError("/tmp/x", original_error=PermissionError())
        assert isinstance(error, FileError)
        assert error.file_path == "/tmp/x"
        assert error.message == "Cannot access path: /tmp/x"

    def test_decode_error(self):
        error = DecodeError("data.bin", "utf-8")
        assert isinstance(error, FileError)
        assert error.encoding == "utf-8"
        assert error.message == "Not a valid utf-8 text file: data.bin"


@pytest.mark.unit
@pytest.mark.cli
class TestExitCodeMapping:
    """Test get_exit_code_for_exception."""

    @pytest.mark.parametrize(
        "exception,expected",
        [
            (PatternError("("), 3),
            (ValidationError("bad"), 3),
            (ValueError("bad"), 3),
            (TypeError("bad"), 3),
            (FileAccessError("x"), 4),
            (DecodeError("x", "utf-8"), 4),
            (OSError("x"), 2),
            (MinigrepError("x"), 2),
            (RuntimeError("x"), 2),
        ],
    )
    def test_mapping(self, exception, expected):
        assert get_exit_code_for_exception(exception) == expected
