from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Tuple

import pytest

from textmemento.runtime import telemetry


class RecordingLogger:
    """Stands in for ``telelog.Logger`` and keeps every call it receives."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str, Dict[str, str]]] = []
        self.spans: List[str] = []
        self.components: List[str] = []
        self.context: Dict[str, str] = {}
        self.context_seen: List[Dict[str, str]] = []

    def _record(self, level: str, message: str, data: List[Tuple[str, str]]) -> None:
        self.records.append((level, message, dict(data)))

    def debug_with(self, message: str, data: List[Tuple[str, str]]) -> None:
        self._record("debug", message, data)

    def info_with(self, message: str, data: List[Tuple[str, str]]) -> None:
        self._record("info", message, data)

    def error_with(self, message: str, data: List[Tuple[str, str]]) -> None:
        self._record("error", message, data)

    def add_context(self, key: str, value: str) -> None:
        self.context[key] = value

    def remove_context(self, key: str) -> None:
        self.context.pop(key, None)

    @contextmanager
    def profile(self, operation: str) -> Iterator[None]:
        self.spans.append(operation)
        self.context_seen.append(dict(self.context))
        yield

    @contextmanager
    def track_component(self, name: str) -> Iterator[None]:
        self.components.append(name)
        yield

    def events(self, name: str) -> List[Dict[str, str]]:
        return [data for _, message, data in self.records if message == f"event::{name}"]


@pytest.fixture
def recording_logger(monkeypatch: pytest.MonkeyPatch) -> RecordingLogger:
    recorder = RecordingLogger()

    def fake_get_logger(name: Optional[str] = None) -> Any:
        return recorder

    monkeypatch.setattr(telemetry, "get_logger", fake_get_logger)
    return recorder
