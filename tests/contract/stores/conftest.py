"""Fixtures for store contract tests.

Provided fixtures
-----------------
- **catalog**, **ledger**, **journal**: a fresh store of the requested
  backend per test. Currently only ``"memory"`` exists; add new identifiers
  to the ``params`` lists and branch below to run the same contract against
  another implementation.
"""

from __future__ import annotations

import pytest

from tendero.adapters.id_generators import SimpleIdGenerator
from tendero.adapters.memory import (
    InMemoryCustomerLedger,
    InMemoryProductCatalog,
    InMemorySalesJournal,
    InMemoryStoreData,
)
from tendero.interfaces.catalog import ProductCatalog
from tendero.interfaces.journal import SalesJournal
from tendero.interfaces.ledger import CustomerLedger


@pytest.fixture(params=["memory"])
def catalog(request: pytest.FixtureRequest) -> ProductCatalog:
    """A fresh, empty product catalog."""
    match request.param:
        case "memory":
            return InMemoryProductCatalog(
                InMemoryStoreData(), SimpleIdGenerator(prefix="P", length=3)
            )
        case _:
            raise ValueError(f"unknown catalog type: {request.param}")


@pytest.fixture(params=["memory"])
def ledger(request: pytest.FixtureRequest, clock) -> CustomerLedger:
    """A fresh, empty customer ledger on a ticking clock."""
    match request.param:
        case "memory":
            return InMemoryCustomerLedger(
                InMemoryStoreData(),
                SimpleIdGenerator(prefix="C", length=3),
                clock=clock,
            )
        case _:
            raise ValueError(f"unknown ledger type: {request.param}")


@pytest.fixture(params=["memory"])
def journal(request: pytest.FixtureRequest, clock) -> SalesJournal:
    """A fresh, empty sales journal on a ticking clock."""
    match request.param:
        case "memory":
            return InMemorySalesJournal(
                InMemoryStoreData(),
                SimpleIdGenerator(prefix="S", length=3),
                clock=clock,
            )
        case _:
            raise ValueError(f"unknown journal type: {request.param}")
