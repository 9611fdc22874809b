#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parallel recursive directory traversal.

Every path becomes one task on a shared, bounded thread pool. A task
classifies its path with ``os.lstat`` and then either lists a directory,
searches a regular file, or skips the path. The coordinating thread submits
a task for each listed child and joins results per directory: each directory
owns a join node that collects its children's results and hands the
concatenation to its parent once the last child has finished.

Pool tasks never wait on other tasks, so a small pool cannot deadlock on a
deep tree, and workers share nothing but the read-only compiled pattern.
"""

from __future__ import annotations

import logging
import os
import queue
import stat
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from minigrep.constants import DEFAULT_ENCODING, SkipReason
from minigrep.exceptions import DecodeError, FileAccessError, FileError
from minigrep.progress import SearchEvent, SearchEventCallback
from minigrep.search.pattern import CompiledPattern
from minigrep.search.scanner import search_text
from minigrep.search.types import FileMatches

logger = logging.getLogger(__name__)


def search_content(
    data: bytes,
    path: Path | str,
    pattern: CompiledPattern,
    encoding: str = DEFAULT_ENCODING,
) -> FileMatches | None:
    """Decode one file's bytes and search them.

    Parameters
    ----------
    data : bytes
        Raw file content
    path : Path or str
        Path recorded on the result
    pattern : CompiledPattern
        Pattern to scan for
    encoding : str, default "utf-8"
        Strict decoding is used; any invalid sequence rejects the whole file

    Returns
    -------
    FileMatches or None
        None when no line matched

    Raises
    ------
    DecodeError
        If ``data`` is not valid text in ``encoding``

    """
    try:
        text = data.decode(encoding)
    except UnicodeDecodeError as exc:
        raise DecodeError(str(path), encoding, original_error=exc) from exc

    matched = search_text(text, pattern)
    if not matched:
        return None
    return FileMatches(path=path, matches=tuple(matched))


@dataclass
class _Visit:
    """Outcome of processing one path on a worker thread."""

    path: str
    children: list[str] = field(default_factory=list)
    file_matches: FileMatches | None = None
    searched: bool = False
    skip_reason: SkipReason | None = None
    error: FileError | None = None


class _JoinNode:
    """Fan-in barrier collecting the results of one directory's children."""

    __slots__ = ("parent", "pending", "results")

    def __init__(self, parent: _JoinNode | None, pending: int) -> None:
        self.parent = parent
        self.pending = pending
        self.results: list[FileMatches] = []

    def complete(self, results: list[FileMatches]) -> None:
        self.results.extend(results)
        self.pending -= 1
        if self.pending == 0 and self.parent is not None:
            self.parent.complete(self.results)


class DirectoryWalker:
    """Search every readable text file below a root path in parallel.

    Parameters
    ----------
    pattern : CompiledPattern
        Pattern shared read-only by all workers
    max_workers : int, optional
        Thread pool size; the executor default when None
    encoding : str, default "utf-8"
        Text encoding for file content
    progress_callback : SearchEventCallback, optional
        Receives started/item_done/skipped/finished events on the
        coordinating thread

    """

    def __init__(
        self,
        pattern: CompiledPattern,
        *,
        max_workers: int | None = None,
        encoding: str = DEFAULT_ENCODING,
        progress_callback: SearchEventCallback | None = None,
    ) -> None:
        self.pattern = pattern
        self.max_workers = max_workers
        self.encoding = encoding
        self.progress_callback = progress_callback

    def walk(self, root: str | os.PathLike[str]) -> list[FileMatches]:
        """Search ``root`` recursively and return one entry per matching file.

        Symbolic links are never followed, including when ``root`` is one.
        Unreadable or undecodable paths are skipped. The order of the returned
        files is not defined.
        """
        root_path = os.fspath(root)
        self._emit(SearchEvent("started", f"Searching {root_path}", path=root_path))
        logger.debug("Walking %s (max_workers=%s)", root_path, self.max_workers or "default")

        root_node = _JoinNode(parent=None, pending=1)
        finished: queue.SimpleQueue[Future[_Visit]] = queue.SimpleQueue()
        waiting: dict[Future[_Visit], _JoinNode] = {}

        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="minigrep-walk") as executor:

            def submit(path: str, node: _JoinNode) -> None:
                future = executor.submit(self._visit, path)
                waiting[future] = node
                future.add_done_callback(finished.put)

            submit(root_path, root_node)
            while waiting:
                future = finished.get()
                node = waiting.pop(future)
                visit = future.result()
                self._report(visit)

                if visit.children:
                    child_node = _JoinNode(parent=node, pending=len(visit.children))
                    for child in visit.children:
                        submit(child, child_node)
                else:
                    node.complete([visit.file_matches] if visit.file_matches is not None else [])

        results = root_node.results
        logger.debug("Finished walking %s: %d file(s) matched", root_path, len(results))
        self._emit(
            SearchEvent("finished", f"Finished searching {root_path}", path=root_path, current=len(results))
        )
        return results

    def _visit(self, path: str) -> _Visit:
        try:
            info = os.lstat(path)
        except OSError as exc:
            return _Visit(path, skip_reason="metadata", error=FileAccessError(path, original_error=exc))

        mode = info.st_mode
        if stat.S_ISLNK(mode):
            return _Visit(path, skip_reason="symlink")
        if stat.S_ISDIR(mode):
            return self._list_directory(path)
        if stat.S_ISREG(mode):
            return self._search_file(path)
        return _Visit(path, skip_reason="special")

    def _list_directory(self, path: str) -> _Visit:
        try:
            with os.scandir(path) as entries:
                children = [entry.path for entry in entries]
        except OSError as exc:
            return _Visit(path, skip_reason="listing", error=FileAccessError(path, original_error=exc))
        return _Visit(path, children=children)

    def _search_file(self, path: str) -> _Visit:
        try:
            with open(path, "rb") as handle:
                data = handle.read()
        except OSError as exc:
            return _Visit(path, skip_reason="read", error=FileAccessError(path, original_error=exc))

        try:
            file_matches = search_content(data, Path(path), self.pattern, self.encoding)
        except DecodeError as exc:
            return _Visit(path, skip_reason="decode", error=exc)
        return _Visit(path, file_matches=file_matches, searched=True)

    def _report(self, visit: _Visit) -> None:
        if visit.skip_reason is not None:
            message = visit.error.message if visit.error is not None else f"Skipping {visit.skip_reason}: {visit.path}"
            self._emit(
                SearchEvent(
                    "skipped",
                    message,
                    path=visit.path,
                    metadata={"reason": visit.skip_reason, "error": visit.error},
                )
            )
        elif visit.searched:
            matched_lines = len(visit.file_matches.matches) if visit.file_matches is not None else 0
            self._emit(
                SearchEvent(
                    "item_done",
                    f"Searched {visit.path}",
                    path=visit.path,
                    current=matched_lines,
                    metadata={"matched_lines": matched_lines},
                )
            )

    def _emit(self, event: SearchEvent) -> None:
        if self.progress_callback is not None:
            self.progress_callback(event)
