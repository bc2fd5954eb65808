"""Snapshot history for the code buffer."""

from .snapshot import Snapshot, make_snapshot_id
from .store import SEED_LABEL, HistoryStore, UnknownSnapshotError

__all__ = [
    "HistoryStore",
    "SEED_LABEL",
    "Snapshot",
    "UnknownSnapshotError",
    "make_snapshot_id",
]
