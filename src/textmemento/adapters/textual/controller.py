"""UI-agnostic controller that drives a Buffer/History pair for Textual."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from textmemento.buffer import Buffer, History


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class EditorStatus:
    action: str
    cursor: int
    length: int
    can_undo: bool
    can_redo: bool

    def render(self) -> str:
        flags = []
        if self.can_undo:
            flags.append("undo")
        if self.can_redo:
            flags.append("redo")
        available = ",".join(flags) or "-"
        return (
            f"{self.action} | snapshot {self.cursor + 1}/{self.length}"
            f" | available: {available}"
        )


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the controller to update Textual widgets."""

    update_buffer: Callable[[str], None]
    update_status: Callable[[EditorStatus], None] = _noop
    log: Callable[[str], None] = _noop


class HistoryController:
    """Routes append/save/undo/redo commands and refreshes the UI afterwards."""

    def __init__(
        self,
        hooks: TextualUIHooks,
        *,
        buffer: Optional[Buffer] = None,
        history: Optional[History] = None,
    ) -> None:
        self.buffer = buffer or Buffer(name="textual")
        self.history = history or History()
        self.hooks = hooks
        self._refresh("ready")

    def append(self, text: str) -> None:
        if not text:
            return
        self.buffer.append(text)
        self._log_state("append ->", text=text)
        self._refresh("append")

    def save(self) -> None:
        self.history.save(self.buffer)
        self._log_state("save ->")
        self._refresh("save")

    def undo(self) -> bool:
        moved = self.history.undo(self.buffer)
        self._log_state("undo ->", moved=moved)
        self._refresh("undo" if moved else "nothing to undo")
        return moved

    def redo(self) -> bool:
        moved = self.history.redo(self.buffer)
        self._log_state("redo ->", moved=moved)
        self._refresh("redo" if moved else "nothing to redo")
        return moved

    def status(self, action: str) -> EditorStatus:
        return EditorStatus(
            action=action,
            cursor=self.history.cursor,
            length=len(self.history),
            can_undo=self.history.can_undo(),
            can_redo=self.history.can_redo(),
        )

    def _refresh(self, action: str) -> None:
        self.hooks.update_buffer(self.buffer.get_content())
        self.hooks.update_status(self.status(action))

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update(fields)
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        return {
            "buffer": self.buffer.name,
            "cursor": self.history.cursor,
            "snapshots": len(self.history),
            "policy": self.history.policy.value,
        }


__all__ = ["EditorStatus", "HistoryController", "TextualUIHooks"]
