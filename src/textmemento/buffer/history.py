"""Linear undo/redo history over full-content snapshots."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from textmemento.runtime import telemetry

from .originator import Originator
from .snapshot import Snapshot


class SavePolicy(str, Enum):
    """What ``History.save`` does with snapshots ahead of the cursor."""

    TRUNCATE = "truncate"
    APPEND = "append"

    @classmethod
    def parse(cls, value: "str | SavePolicy") -> "SavePolicy":
        if isinstance(value, SavePolicy):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(policy.value for policy in cls)
            raise ValueError(
                f"Unknown save policy '{value}'. Expected one of: {names}."
            ) from None

    @classmethod
    def from_env(cls) -> "SavePolicy":
        return cls.parse(telemetry.env("HISTORY_POLICY") or cls.TRUNCATE.value)


class History:
    """Ordered snapshots plus a cursor pointing at the active one.

    Snapshots are treated as opaque tokens: they are obtained from and handed
    back to an :class:`Originator` and never inspected here.

    With ``SavePolicy.TRUNCATE`` a save after undo discards the entries ahead
    of the cursor. ``SavePolicy.APPEND`` keeps them stored, but since the
    cursor always moves to the newest entry they cannot be reached again.
    """

    def __init__(self, *, policy: "SavePolicy | str | None" = None) -> None:
        self._snapshots: List[Snapshot] = []
        self._cursor: int = -1
        self.policy = SavePolicy.parse(policy) if policy else SavePolicy.from_env()

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def snapshots(self) -> Tuple[Snapshot, ...]:
        return tuple(self._snapshots)

    def __len__(self) -> int:
        return len(self._snapshots)

    def current(self) -> Optional[Snapshot]:
        if self._cursor < 0:
            return None
        return self._snapshots[self._cursor]

    def save(self, originator: Originator) -> None:
        with telemetry.span(
            "history::save",
            metadata={"policy": self.policy.value, "cursor": self._cursor},
        ):
            snapshot = originator.export_snapshot()
            if self.policy is SavePolicy.TRUNCATE:
                del self._snapshots[self._cursor + 1 :]
            self._snapshots.append(snapshot)
            self._cursor = len(self._snapshots) - 1

    def can_undo(self) -> bool:
        return self._cursor > 0

    def undo(self, originator: Originator) -> bool:
        if not self.can_undo():
            self._noop("undo")
            return False
        self._move("undo", originator, self._cursor - 1)
        return True

    def can_redo(self) -> bool:
        return self._cursor < len(self._snapshots) - 1

    def redo(self, originator: Originator) -> bool:
        if not self.can_redo():
            self._noop("redo")
            return False
        self._move("redo", originator, self._cursor + 1)
        return True

    def _move(self, action: str, originator: Originator, target: int) -> None:
        # cursor only advances once the originator accepted the snapshot
        with telemetry.span(
            f"history::{action}", metadata={"cursor": self._cursor, "target": target}
        ):
            originator.import_snapshot(self._snapshots[target])
            self._cursor = target

    def _noop(self, action: str) -> None:
        telemetry.record_event(
            "history.noop",
            level="debug",
            data={
                "action": action,
                "cursor": self._cursor,
                "length": len(self._snapshots),
            },
        )


__all__ = ["History", "SavePolicy"]
