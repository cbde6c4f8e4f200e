"""Snapshot-based undo/redo for text buffers."""

__all__ = [
    "adapters",
    "buffer",
    "demo",
    "runtime",
]

__version__ = "0.1.0"
