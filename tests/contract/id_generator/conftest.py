"""Fixtures for IdGenerator contract tests."""

from collections.abc import Iterator

import pytest

from tendero.adapters.id_generators import (
    SimpleIdGenerator,
    ULIDGenerator,
    UUIDv4Generator,
)
from tendero.interfaces.id_generator import IdGenerator

GENERATORS = {
    "ulid": ULIDGenerator,
    "uuid4": UUIDv4Generator,
    "simple": SimpleIdGenerator,
    "simple-prefixed": lambda: SimpleIdGenerator(prefix="P-", length=4),
}


@pytest.fixture(params=sorted(GENERATORS))
def id_generator(request: pytest.FixtureRequest) -> Iterator[IdGenerator]:
    """A brand-new generator of each kind the stores can be wired with."""
    yield GENERATORS[request.param]()


@pytest.fixture(params=["ulid", "simple"])
def ordered_id_generator(request: pytest.FixtureRequest) -> Iterator[IdGenerator]:
    """Generators whose ids sort in creation order."""
    yield GENERATORS[request.param]()
