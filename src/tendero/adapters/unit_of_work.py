"""In-memory Unit of Work for TENDERO.

Provides a context-managed UnitOfWork over a shared `InMemoryStoreData`.
Every write the stores make inside the unit registers a compensating undo
action; leaving the context without committing replays them in reverse, so
a failed unit leaves no partial writes behind. When a `SnapshotStore` is
configured, `commit` saves the whole store as one durable unit.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from tendero.adapters.id_generators import ULIDGenerator
from tendero.adapters.memory import (
    InMemoryCustomerLedger,
    InMemoryProductCatalog,
    InMemorySalesJournal,
    InMemoryStoreData,
)
from tendero.adapters.memory.store import Clock, utc_now
from tendero.domain.models import StoreProfile, StoreSnapshot
from tendero.interfaces.id_generator import IdGenerator
from tendero.interfaces.snapshot_store import SnapshotStore
from tendero.interfaces.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """Unit of work over in-memory stores with an undo log.

    The undo log is kept per thread, so a unit entered on one thread never
    rolls back writes made by another. Units on different threads take
    turns: each holds the store's unit lock from entry to exit, and
    `snapshot` takes it too, so saves and reads only see committed state.
    """

    def __init__(  # pylint: disable=too-many-arguments
        self,
        data: InMemoryStoreData | None = None,
        id_generator: IdGenerator | None = None,
        *,
        snapshot_store: SnapshotStore | None = None,
        profile: StoreProfile | None = None,
        clock: Clock = utc_now,
    ) -> None:
        if snapshot_store is not None and profile is None:
            raise ValueError("A store profile is required to persist snapshots")

        self.data = data if data is not None else InMemoryStoreData()
        self.snapshot_store = snapshot_store
        self.profile = profile
        self.committed = False
        self._local = threading.local()

        ids = id_generator if id_generator is not None else ULIDGenerator()
        self.products = InMemoryProductCatalog(self.data, ids, self._record_undo)
        self.customers = InMemoryCustomerLedger(
            self.data, ids, self._record_undo, clock=clock
        )
        self.sales = InMemorySalesJournal(
            self.data, ids, self._record_undo, clock=clock
        )

    def __enter__(self) -> InMemoryUnitOfWork:
        self.data.unit_lock.acquire()
        self._local.undo = []
        self.committed = False
        return super().__enter__()

    def __exit__(self, *args):
        try:
            super().__exit__(*args)
        finally:
            self._local.undo = None
            self.data.unit_lock.release()

    def commit(self):
        if self.snapshot_store is not None and self.profile is not None:
            self.snapshot_store.save(self.profile.store_id, self.snapshot())
        self._pending().clear()
        self.committed = True

    def snapshot(self) -> StoreSnapshot:
        with self.data.unit_lock:
            return super().snapshot()

    def rollback(self):
        pending = self._pending()
        if not pending:
            return
        logger.warning("Rolling back %d uncommitted write(s)", len(pending))
        while pending:
            undo = pending.pop()
            undo()

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #

    def _pending(self) -> list[Callable[[], None]]:
        pending = getattr(self._local, "undo", None)
        return pending if pending is not None else []

    def _record_undo(self, undo: Callable[[], None]) -> None:
        # Writes made outside a `with uow:` block are final immediately.
        pending = getattr(self._local, "undo", None)
        if pending is not None:
            pending.append(undo)
