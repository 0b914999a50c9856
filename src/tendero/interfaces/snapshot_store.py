"""Interface for the optional persistence collaborator.

The core runs entirely in memory. A `SnapshotStore`, when configured, is
handed a full `StoreSnapshot` every time a unit of work commits and can
hand it back when a session for the same store starts again. Without one,
state lives for the session only.

Contract:
- `save` writes the whole snapshot as one durable unit (all or nothing)
  and is idempotent: saving the same snapshot twice leaves the same state.
- `load` returns None for a store that has never been saved.
"""

import abc

from tendero.domain.models import StoreSnapshot


class SnapshotStoreError(Exception):
    """Base class for snapshot store errors."""


class SnapshotStoreUnavailableError(SnapshotStoreError):
    """Operational/connection errors; callers may retry."""


class SnapshotStore(abc.ABC):
    """Contract for saving and loading store snapshots."""

    @abc.abstractmethod
    def save(self, store_id: str, snapshot: StoreSnapshot) -> None:
        """Replace the persisted state of ``store_id`` with ``snapshot``."""

    @abc.abstractmethod
    def load(self, store_id: str) -> StoreSnapshot | None:
        """Return the persisted snapshot of ``store_id``, or None."""
