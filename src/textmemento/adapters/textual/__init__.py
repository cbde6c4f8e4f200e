"""Textual integration: controller plus the runnable app module."""

from .controller import EditorStatus, HistoryController, TextualUIHooks

__all__ = ["EditorStatus", "HistoryController", "TextualUIHooks"]
