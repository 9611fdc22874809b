#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/minigrep/progress.py
"""Event callback system for directory searches.

The search core never logs or prints the paths it has to skip. Instead it
emits ``SearchEvent`` objects through an optional callback so that the caller
(the command-line layer, or any embedder) decides whether to report them.

Examples
--------
Collect every skipped path:

    >>> from minigrep import search_and_render, SearchConfig
    >>> skipped = []
    >>> def on_event(event):
    ...     if event.event_type == "skipped":
    ...         skipped.append((event.path, event.metadata["reason"]))
    >>> search_and_render(SearchConfig("needle", "src"), progress_callback=on_event)

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Literal

EventType = Literal["started", "item_done", "skipped", "finished"]


@dataclass
class SearchEvent:
    """Event emitted while a search walks the filesystem.

    Parameters
    ----------
    event_type : EventType
        Type of event:

        - "started": The walk has begun. ``path`` is the root.
        - "item_done": A file was searched. ``metadata["matched_lines"]``
          holds the number of matching lines (possibly 0).
        - "skipped": A path was not searched. ``metadata["reason"]`` is one of
          "metadata", "symlink", "listing", "read", "decode" or "special", and
          ``metadata["error"]`` carries the exception when there was one.
        - "finished": The walk completed. ``current`` is the number of files
          with matches.

    message : str
        Human-readable description of the event
    path : str, default ""
        Path the event refers to
    current : int, default 0
        Event-specific counter
    metadata : dict, default empty
        Additional event-specific information

    """

    event_type: EventType
    message: str
    path: str = ""
    current: int = 0
    metadata: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        """Return human-readable string representation."""
        return f"[{self.event_type.upper()}] {self.message}"


# Callbacks are invoked on the thread that coordinates the walk, never on pool workers
SearchEventCallback = Callable[[SearchEvent], None]
