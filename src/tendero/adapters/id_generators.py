"""ID generators for TENDERO."""

import threading
import uuid

from ulid import monotonic

from tendero.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class ULIDGenerator(IdGenerator):
    """Thread-safe monotonic ULID generator.

    ULIDs are unique, lexicographically sortable identifiers.
    They consist of a millisecond timestamp and a random component; the
    monotonic variant increments the random part within the same
    millisecond, so ids sort in creation order.
    This generator uses the `ulid-py` library to create ULIDs.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate a new ULID (serialized across threads)."""
        with self._lock:
            return str(monotonic.new())


class UUIDv4Generator(IdGenerator):
    """UUIDv4 generator.

    UUIDv4 are universally unique identifiers that are randomly generated.
    They are not guaranteed to be sequential or ordered in any way.
    """

    def new_id(self) -> str:
        """Generate a new UUID."""
        return str(uuid.uuid4())


class SimpleIdGenerator(IdGenerator):
    """Sequential, zero-padded ids with an optional prefix (``P-0001``).

    Note:
        Deterministic; intended for tests and demos.
    """

    def __init__(self, prefix: str = "", length: int = 26) -> None:
        self._counter = 0
        self._prefix = prefix
        self._length = length
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate a new unique identifier."""
        with self._lock:
            self._counter += 1
            return f"{self._prefix}{self._counter:0{self._length}d}"
