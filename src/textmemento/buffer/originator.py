"""Boundary between the history stack and whatever it restores."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .snapshot import Snapshot


@runtime_checkable
class Originator(Protocol):
    """Anything that can produce a snapshot of itself and restore from one."""

    def export_snapshot(self) -> Snapshot:
        """Return an immutable capture of the current state."""
        ...

    def import_snapshot(self, snapshot: Snapshot) -> None:
        """Overwrite the current state with ``snapshot``."""
        ...


class SnapshotTypeError(TypeError):
    """Raised when something other than a ``Snapshot`` is handed to a buffer."""

    def __init__(self, value: object) -> None:
        super().__init__(
            f"Expected a Snapshot, got {type(value).__name__!s} instead"
        )
        self.value = value
