"""Immutable captures of buffer content."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Content of a buffer at one point in time.

    ``str`` is immutable, so holding the value is already an independent copy;
    later edits to the buffer never reach a stored snapshot.
    """

    saved_content: str

    def get_saved_content(self) -> str:
        return self.saved_content
