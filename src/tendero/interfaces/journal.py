"""Interface for the Sales Journal."""

from __future__ import annotations

import abc
from collections.abc import Sequence

from tendero.domain.errors import SaleNotFoundError
from tendero.domain.models import PaymentMethod, Sale, SaleItem
from tendero.domain.utils import MoneyLike


class SalesJournal(abc.ABC):
    """Append-only record of completed sales.

    There is deliberately no update or delete operation: a sale, once
    recorded, is final.
    """

    @abc.abstractmethod
    def record(
        self,
        items: Sequence[SaleItem],
        total: MoneyLike,
        payment_method: PaymentMethod,
        customer_id: str | None = None,
    ) -> Sale:
        """Append a sale with a fresh id and the current timestamp.

        The total must equal the sum of the item subtotals.

        Raises:
            ValidationError: If items is empty, the total does not match the
                items, a credit sale has no customer, or a cash sale has one.
        """

    @abc.abstractmethod
    def list(self) -> list[Sale]:
        """All sales in chronological order."""

    def recent(self, n: int) -> list[Sale]:
        """The last ``n`` sales, oldest first."""
        if n <= 0:
            return []
        return self.list()[-n:]

    def find(self, sale_id: str) -> Sale | None:
        """Return the sale, or None if unknown."""
        return next((s for s in self.list() if s.id == sale_id), None)

    def get(self, sale_id: str) -> Sale:
        """Return the sale or raise `SaleNotFoundError`."""
        if (sale := self.find(sale_id)) is None:
            raise SaleNotFoundError(sale_id)
        return sale
