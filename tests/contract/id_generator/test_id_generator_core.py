"""Contract tests for IdGenerator implementations."""

from __future__ import annotations

import concurrent.futures as cf
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tendero.interfaces.id_generator import IdGenerator


def test_returns_non_empty_str(id_generator: IdGenerator) -> None:
    """new_id() returns a non-empty string."""
    new_id = id_generator.new_id()
    assert isinstance(new_id, str)
    assert new_id.strip() != ""


def test_returns_unique_ids(id_generator: IdGenerator) -> None:
    """Consecutive calls never repeat an id."""
    ids = [id_generator.new_id() for _ in range(5000)]
    assert len(ids) == len(set(ids))


def test_unique_across_threads(id_generator: IdGenerator) -> None:
    """One generator shared by many threads still hands out unique ids."""
    n = 8000
    with cf.ThreadPoolExecutor(max_workers=16) as ex:
        ids = list(ex.map(lambda _: id_generator.new_id(), range(n)))

    assert len(set(ids)) == n
