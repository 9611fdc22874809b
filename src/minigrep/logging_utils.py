"""Logging setup shared by the minigrep entry points."""

from __future__ import annotations

import logging
import sys
from typing import Optional

_PLAIN_FORMAT = "%(levelname)s: %(message)s"
# Walker tasks run on pool threads, so traces name the thread
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(threadName)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def _attach(root_logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Route log records to standard error and, optionally, a file.

    Existing root handlers are replaced, so calling this twice does not
    duplicate output.

    Parameters
    ----------
    log_level : int | str
        Numeric level or level name such as ``"INFO"``. Unknown names fall
        back to INFO.
    log_file : str, optional
        File that receives a copy of every record. A file that cannot be
        opened produces a warning and is otherwise ignored.
    trace_mode : bool, default False
        Add timestamps, thread names and logger names to each record.

    Returns
    -------
    logging.Logger
        The root logger.

    """
    level = _resolve_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if trace_mode:
        formatter = logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(_PLAIN_FORMAT)

    _attach(root_logger, logging.StreamHandler(sys.stderr), level, formatter)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            _attach(root_logger, file_handler, level, formatter)
            root_logger.info("Logging to file: %s", log_file)

    return root_logger
