"""Executable Textual app for editing a buffer with save/undo/redo."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Input, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use textmemento.adapters.textual.app"
    ) from exc

from textmemento.buffer import History, SavePolicy
from textmemento.runtime import telemetry

from .controller import EditorStatus, HistoryController, TextualUIHooks


@dataclass
class UIState:
    buffer_text: str = ""
    status_text: str = ""


class TextMementoApp(App[None]):
    """Input line that appends to a buffer, with history keybindings."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
		content-align: left top;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        Binding("ctrl+s", "save", "Save", priority=True),
        Binding("ctrl+z", "undo", "Undo", priority=True),
        Binding("ctrl+y", "redo", "Redo", priority=True),
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(self, *, policy: SavePolicy | str | None = None) -> None:
        super().__init__()
        self._state = UIState()
        self._policy = policy
        self.controller: HistoryController | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="buffer-area"):
            self._buffer_widget = Static("", id="buffer-view")
            yield self._buffer_widget
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Input(placeholder="Text to append, Enter to apply", id="append-input")
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.controller = HistoryController(hooks, history=History(policy=self._policy))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if self.controller:
            self.controller.append(event.value)
        event.input.value = ""

    def action_save(self) -> None:
        if self.controller:
            self.controller.save()

    def action_undo(self) -> None:
        if self.controller:
            self.controller.undo()

    def action_redo(self) -> None:
        if self.controller:
            self.controller.redo()

    def _update_buffer(self, text: str) -> None:
        self._state.buffer_text = text
        if self._buffer_widget:
            self._buffer_widget.update(text)

    def _update_status(self, status: EditorStatus) -> None:
        self._state.status_text = status.render()
        if self._status_widget:
            self._status_widget.update(self._state.status_text)

    def _log_line(self, line: str) -> None:
        telemetry.record_event("textual.log", level="debug", data={"line": line})


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the textmemento Textual editor.")
    parser.add_argument(
        "--policy",
        choices=[policy.value for policy in SavePolicy],
        default=None,
        help="History save policy (default: $TEXTMEMENTO_HISTORY_POLICY or truncate)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    TextMementoApp(policy=args.policy).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
