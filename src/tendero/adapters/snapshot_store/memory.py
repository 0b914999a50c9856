"""In-memory SnapshotStore, for tests and single-process sessions."""

from __future__ import annotations

import threading

from tendero.domain.models import StoreSnapshot
from tendero.interfaces.snapshot_store import SnapshotStore


class InMemorySnapshotStore(SnapshotStore):
    """Keeps the last saved snapshot of each store in a dict."""

    def __init__(self) -> None:
        self._snapshots: dict[str, StoreSnapshot] = {}
        self._lock = threading.Lock()
        self.saves = 0

    def save(self, store_id: str, snapshot: StoreSnapshot) -> None:
        with self._lock:
            self._snapshots[store_id] = snapshot
            self.saves += 1

    def load(self, store_id: str) -> StoreSnapshot | None:
        with self._lock:
            return self._snapshots.get(store_id)
