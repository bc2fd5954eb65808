"""Append-only snapshot history with jump-to-snapshot."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from csharp_assist.runtime import telemetry

from .snapshot import Snapshot

SEED_LABEL = "Initial state"


class UnknownSnapshotError(KeyError):
    """Raised when a snapshot id is not part of the history."""

    def __init__(self, snapshot_id: str) -> None:
        super().__init__(f"Snapshot '{snapshot_id}' is not in the history")
        self.snapshot_id = snapshot_id


class HistoryStore:
    """Current buffer plus every snapshot recorded for it, newest first.

    Entries are only ever prepended. Reverting moves the current buffer to a
    stored snapshot's code but neither creates nor drops entries, so any
    snapshot stays reachable for the lifetime of the store.
    """

    def __init__(
        self,
        seed: str,
        *,
        label: str = SEED_LABEL,
        logger_name: str | None = None,
    ) -> None:
        seed_entry = Snapshot(label=label, code=seed)
        # Stored oldest first; ``entries`` reverses for the public view.
        self._entries: List[Snapshot] = [seed_entry]
        self._index: Dict[str, Snapshot] = {seed_entry.id: seed_entry}
        self._current = seed
        self._logger_name = logger_name

    @property
    def current(self) -> str:
        return self._current

    @property
    def entries(self) -> Sequence[Snapshot]:
        return tuple(reversed(self._entries))

    @property
    def latest(self) -> Snapshot:
        return self._entries[-1]

    @property
    def oldest(self) -> Snapshot:
        return self._entries[0]

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, snapshot_id: str) -> Snapshot:
        try:
            return self._index[snapshot_id]
        except KeyError as exc:
            raise UnknownSnapshotError(snapshot_id) from exc

    def record_if_changed(self, label: str, candidate: str) -> Optional[Snapshot]:
        """Store ``candidate`` as a new snapshot unless it equals the current code."""

        if candidate == self._current:
            telemetry.record_event(
                "history.skip",
                level="debug",
                data={"label": label},
                logger_name=self._logger_name,
            )
            return None

        with telemetry.span(
            "history::record",
            logger_name=self._logger_name,
            component="history",
            metadata={"label": label},
        ) as handle:
            entry = Snapshot(label=label, code=candidate)
            self._entries.append(entry)
            self._index[entry.id] = entry
            self._current = candidate
            handle.add_metadata("snapshot_id", entry.id)

        telemetry.record_event(
            "history.record",
            data={"label": label, "size": len(self._entries)},
            logger_name=self._logger_name,
        )
        return entry

    def revert_to(self, snapshot_id: str) -> Snapshot:
        with telemetry.span(
            "history::revert",
            logger_name=self._logger_name,
            component="history",
            metadata={"snapshot_id": snapshot_id},
        ):
            entry = self.get(snapshot_id)
            self._current = entry.code

        telemetry.record_event(
            "history.revert",
            data={"snapshot_id": snapshot_id, "label": entry.label},
            logger_name=self._logger_name,
        )
        return entry

    def revert_to_oldest(self) -> Snapshot:
        return self.revert_to(self.oldest.id)

    def edit(self, text: str) -> None:
        """Overwrite the current code with hand-typed text, without a snapshot."""

        self._current = text


__all__ = ["HistoryStore", "UnknownSnapshotError", "SEED_LABEL"]
