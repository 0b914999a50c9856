"""Unit of Work interface for TENDERO.

Defines the AbstractUnitOfWork contract: a context-managed unit of work
exposing the three stores (catalog, ledger, journal) and abstract
commit/rollback methods.
"""

from __future__ import annotations

import abc

from tendero.domain.models import StoreProfile, StoreSnapshot

from .catalog import ProductCatalog
from .journal import SalesJournal
from .ledger import CustomerLedger


class AbstractUnitOfWork(abc.ABC):
    """Contract for a transactional unit of work.

    Writes made through the stores between ``__enter__`` and `commit` form
    one unit: leaving the context without committing undoes all of them.
    """

    products: ProductCatalog
    customers: CustomerLedger
    sales: SalesJournal
    profile: StoreProfile | None = None

    def __enter__(self) -> AbstractUnitOfWork:
        """Enter the unit of work context and return the unit.

        Implementations may acquire transactional resources here.
        """
        return self

    def __exit__(self, *args):
        """Exit the unit of work context.

        Default behavior is to roll back on exit.
        """
        self.rollback()

    @abc.abstractmethod
    def commit(self):
        """Persist changes and finalize the transaction."""

    @abc.abstractmethod
    def rollback(self):
        """Revert changes and clean up transactional resources."""

    def snapshot(self) -> StoreSnapshot:
        """Return an immutable copy of the current state of every store."""
        return StoreSnapshot(
            products=tuple(self.products.list()),
            customers=tuple(self.customers.list()),
            sales=tuple(self.sales.list()),
            profile=self.profile,
        )
