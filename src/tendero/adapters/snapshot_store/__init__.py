"""SnapshotStore adapters."""

from .memory import InMemorySnapshotStore
from .sqlalchemy_store import SqlAlchemySnapshotStore

__all__ = ["InMemorySnapshotStore", "SqlAlchemySnapshotStore"]
