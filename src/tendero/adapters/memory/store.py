"""In-memory shared data store for the store adapters."""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from tendero.domain.models import Customer, Product, Sale, StoreSnapshot

#: Callback a store uses to register how to undo a write it just made.
type UndoRecorder = Callable[[Callable[[], None]], None]

#: Source of "now" for timestamps; must return UTC-aware datetimes.
type Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current time as a UTC-aware datetime."""
    return datetime.now(timezone.utc)


def discard_undo(_: Callable[[], None]) -> None:
    """Default recorder for writes made outside a unit of work."""


@dataclass(slots=True)
class InMemoryStoreData:
    """Shared in-memory backing store for the catalog, ledger and journal.

    A single instance is passed to the three in-memory adapters so they
    operate on a common state. Each collection has its own re-entrant lock;
    adapters hold it for every read-modify-write on that collection.

    ``unit_lock`` is held by a unit of work from entry to exit, and by
    snapshot readers, so a snapshot never contains another unit's
    uncommitted writes.

    Products and customers are keyed by id (dicts keep insertion order);
    sales are kept in chronological order.
    """

    products: dict[str, Product] = field(default_factory=dict)
    customers: dict[str, Customer] = field(default_factory=dict)
    sales: list[Sale] = field(default_factory=list)

    products_lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False
    )
    customers_lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False
    )
    sales_lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False
    )
    unit_lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False
    )

    @classmethod
    def from_snapshot(cls, snapshot: StoreSnapshot) -> InMemoryStoreData:
        """Seed a fresh data store from a snapshot."""
        return cls(
            products={p.id: p for p in snapshot.products},
            customers={c.id: c for c in snapshot.customers},
            sales=list(snapshot.sales),
        )
