"""Base class for the frozen option dataclasses."""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Copy-on-write helpers for immutable option objects.

    Options are shared read-only by the walker threads, so they are never
    mutated; every change produces a new, re-validated instance.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy with the given fields replaced.

        ``__post_init__`` runs again on the copy, so invalid values raise
        ``ValueError`` here just as they do at construction.
        """
        return replace(self, **kwargs)

    @classmethod
    def option_names(cls) -> frozenset[str]:
        """Return the names of all option fields."""
        return frozenset(option.name for option in fields(cls))

    def update_from_mapping(self, values: Mapping[str, Any]) -> Self:
        """Apply the recognized keys of a configuration table.

        Parameters
        ----------
        values : Mapping[str, Any]
            Field name to value; keys that are not option fields are ignored

        Returns
        -------
        Self
            Updated copy, or ``self`` when no key was recognized

        """
        known = self.option_names()
        recognized = {key: value for key, value in values.items() if key in known}
        if not recognized:
            return self
        return self.create_updated(**recognized)
