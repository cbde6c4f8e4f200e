"""Mutable text buffer that knows how to snapshot itself."""

from __future__ import annotations

from textmemento.runtime import telemetry

from .originator import SnapshotTypeError
from .snapshot import Snapshot


class Buffer:
    """Editable text with no knowledge of history; see ``History`` for that."""

    def __init__(self, *, name: str = "default", content: str = "") -> None:
        self.name = name
        self._content = content

    def append(self, text: str) -> None:
        self._content += text

    def clear(self) -> None:
        self._content = ""

    def get_content(self) -> str:
        return self._content

    def export_snapshot(self) -> Snapshot:
        return Snapshot(self._content)

    def import_snapshot(self, snapshot: Snapshot) -> None:
        if not isinstance(snapshot, Snapshot):
            raise SnapshotTypeError(snapshot)
        self._content = snapshot.get_saved_content()
        telemetry.record_event(
            "buffer.restore",
            level="debug",
            data={"buffer": self.name, "length": len(self._content)},
        )

    def __repr__(self) -> str:
        return f"Buffer(name={self.name!r}, content={self._content!r})"
