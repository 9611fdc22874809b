#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the minigrep library.

Only pattern errors cross the public search boundary. Access and decode
errors describe paths the directory walker skipped; they travel to the caller
inside ``SearchEvent.metadata["error"]`` instead of being raised.

Exception Hierarchy
-------------------
- MinigrepError (base exception)

  - ValidationError (bad option or argument values)
    - PatternError (query is not a valid regular expression)

  - FileError (problems with a path on disk)
    - FileAccessError (metadata, listing or read failures)
    - DecodeError (content is not valid text in the configured encoding)

"""

from typing import Any


class MinigrepError(Exception):
    """Root of every error minigrep raises or reports.

    Parameters
    ----------
    message : str
        Text shown to the user, e.g. after ``Error:`` on the command line
    original_error : Exception, optional
        Lower-level exception this error wraps

    Attributes
    ----------
    message : str
        Same text as ``str(error)``
    original_error : Exception or None
        Wrapped exception, kept for logging and debugging

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(MinigrepError):
    """A value supplied by the caller was rejected.

    Parameters
    ----------
    message : str
        What was wrong with the value
    parameter_name : str, optional
        Option or argument that carried the value
    parameter_value : any, optional
        Rejected value
    original_error : Exception, optional
        Lower-level exception this error wraps

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class PatternError(ValidationError):
    """Exception raised when a regular expression query cannot be compiled.

    This is the only error that aborts a search. It is raised once, before
    any directory is visited.

    Parameters
    ----------
    pattern : str
        The pattern text that failed to compile
    message : str, optional
        Custom error message. If not provided, one is built from the
        underlying ``re.error``
    original_error : Exception, optional
        The ``re.error`` raised by the compiler

    Attributes
    ----------
    pattern : str
        The rejected pattern text

    """

    def __init__(self, pattern: str, message: str | None = None, original_error: Exception | None = None):
        if message is None:
            message = f"Invalid regular expression {pattern!r}"
            if original_error is not None:
                message += f": {original_error}"
        super().__init__(message, parameter_name="query", parameter_value=pattern, original_error=original_error)
        self.pattern = pattern


class FileError(MinigrepError):
    """A path on disk could not be used.

    Parameters
    ----------
    message : str
        What went wrong
    file_path : str, optional
        Offending path, as the walker saw it
    original_error : Exception, optional
        Underlying ``OSError`` or ``UnicodeDecodeError``

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileAccessError(FileError):
    """Metadata, directory listing or file content could not be read.

    Covers permission errors and paths removed while the walk is running.
    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        super().__init__(message or f"Cannot access path: {file_path}", file_path=file_path, original_error=original_error)


class DecodeError(FileError):
    """File content is not valid text.

    Parameters
    ----------
    file_path : str
        Path to the undecodable file
    encoding : str
        Encoding that was attempted
    message : str, optional
        Replacement for the default message
    original_error : Exception, optional
        The ``UnicodeDecodeError`` raised while decoding

    """

    def __init__(
        self,
        file_path: str,
        encoding: str,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        if message is None:
            message = f"Not a valid {encoding} text file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)
        self.encoding = encoding
