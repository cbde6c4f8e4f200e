"""Text buffer, snapshots, and the undo/redo history that ties them together."""

from .buffer import Buffer
from .history import History, SavePolicy
from .originator import Originator, SnapshotTypeError
from .snapshot import Snapshot

__all__ = [
    "Buffer",
    "History",
    "Originator",
    "SavePolicy",
    "Snapshot",
    "SnapshotTypeError",
]
