from __future__ import annotations

import pytest

from textmemento.demo import main, run_demo
from textmemento.runtime import telemetry


def test_run_demo_prints_current_undo_redo() -> None:
    lines: list[str] = []

    buffer = run_demo(echo=lines.append)

    assert lines == [
        "Current content: Hello, world!",
        "Undo: Hello, ",
        "Redo: Hello, world!",
    ]
    assert buffer.get_content() == "Hello, world!"


def test_main_prints_lines_in_order(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--first", "foo", "--second", "bar", "--policy", "append"])

    out = capsys.readouterr().out.splitlines()
    assert out == ["Current content: foobar", "Undo: foo", "Redo: foobar"]


def test_main_applies_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    levels: list[str | None] = []
    monkeypatch.setattr(
        telemetry, "configure", lambda *, min_level=None: levels.append(min_level)
    )

    main(["--log-level", "debug"])

    assert levels == ["debug"]
