"""Interface for the Customer Ledger."""

from __future__ import annotations

import abc
from decimal import Decimal

from tendero.domain.errors import CustomerNotFoundError
from tendero.domain.models import Customer, Transaction, TransactionKind
from tendero.domain.utils import ZERO, MoneyLike

#: Descriptions used when a manual posting comes without a note.
DEFAULT_DESCRIPTIONS = {
    TransactionKind.DEBT: "Manual credit",
    TransactionKind.PAYMENT: "Account payment",
}


class CustomerLedger(abc.ABC):
    """Owns customer accounts and their posting history.

    Customers are never deleted, and their debt only changes through
    `post_transaction`.
    """

    @abc.abstractmethod
    def add(self, name: str, phone: str) -> Customer:
        """Open an account with zero debt and an empty history.

        Raises:
            ValidationError: If the name is blank.
        """

    @abc.abstractmethod
    def post_transaction(
        self,
        customer_id: str,
        amount: MoneyLike,
        kind: TransactionKind,
        description: str | None = None,
    ) -> Transaction:
        """Append a posting and update the running debt.

        A ``DEBT`` adds ``amount`` to the debt and a ``PAYMENT`` subtracts it.
        Payments are not floored: paying more than is owed leaves a negative
        balance (credit in the customer's favour).

        The update is a read-modify-write against the stored account, so
        concurrent postings to the same customer never lose an update.

        Raises:
            ValidationError: If amount is not a positive finite number.
            CustomerNotFoundError: If the customer does not exist.
        """

    @abc.abstractmethod
    def find(self, customer_id: str) -> Customer | None:
        """Return the customer, or None if unknown."""

    @abc.abstractmethod
    def list(self) -> list[Customer]:
        """Return all customers in the order they were added."""

    def get(self, customer_id: str) -> Customer:
        """Return the customer or raise `CustomerNotFoundError`."""
        if (customer := self.find(customer_id)) is None:
            raise CustomerNotFoundError(customer_id)
        return customer

    def total_outstanding_debt(self) -> Decimal:
        """Signed sum of every customer's debt (overpayments count as negative)."""
        return sum((c.current_debt for c in self.list()), ZERO)

    def search(self, term: str) -> list[Customer]:
        """Customers whose name contains ``term`` (case-insensitive)."""
        needle = term.strip().casefold()
        return [c for c in self.list() if needle in c.name.casefold()]

    def top_debtors(self, n: int = 3) -> list[Customer]:
        """The ``n`` customers owing the most, highest first."""
        return sorted(self.list(), key=lambda c: c.current_debt, reverse=True)[:n]
