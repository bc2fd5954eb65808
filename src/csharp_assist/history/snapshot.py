"""Immutable snapshots of the code buffer."""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from datetime import datetime


def make_snapshot_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True, slots=True)
class Snapshot:
    label: str
    code: str
    id: str = field(default_factory=make_snapshot_id)
    created_at: float = field(default_factory=time.time)

    def display_time(self) -> str:
        """Local wall-clock time of creation, ``HH:MM:SS``."""

        return datetime.fromtimestamp(self.created_at).strftime("%H:%M:%S")


__all__ = ["Snapshot", "make_snapshot_id"]
