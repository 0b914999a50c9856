"""In-memory SalesJournal implementation."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from tendero.domain.errors import ValidationError
from tendero.domain.models import PaymentMethod, Sale, SaleItem, items_total
from tendero.domain.utils import MoneyLike, to_money
from tendero.interfaces.id_generator import IdGenerator
from tendero.interfaces.journal import SalesJournal

from .store import Clock, InMemoryStoreData, UndoRecorder, discard_undo, utc_now

logger = logging.getLogger(__name__)


class InMemorySalesJournal(SalesJournal):
    """Append-only SalesJournal backed by `InMemoryStoreData.sales`."""

    def __init__(  # pylint: disable=too-many-arguments
        self,
        data: InMemoryStoreData,
        id_generator: IdGenerator,
        record_undo: UndoRecorder = discard_undo,
        *,
        clock: Clock = utc_now,
    ) -> None:
        self._data = data
        self._ids = id_generator
        self._record_undo = record_undo
        self._clock = clock

    def record(
        self,
        items: Sequence[SaleItem],
        total: MoneyLike,
        payment_method: PaymentMethod,
        customer_id: str | None = None,
    ) -> Sale:
        items = tuple(items)
        if not items:
            raise ValidationError("The cart is empty", field="items")
        total = to_money(total, field="total")
        if (expected := items_total(items)) != total:
            raise ValidationError(
                f"Sale total {total} does not match the items ({expected})",
                field="total",
            )
        if payment_method is PaymentMethod.CREDIT and not customer_id:
            raise ValidationError(
                "Select a customer for credit sales", field="customer_id"
            )

        sale = Sale(
            id=self._ids.new_id(),
            timestamp=self._clock(),
            total=total,
            items=items,
            payment_method=payment_method,
            customer_id=customer_id or None,
        )
        with self._data.sales_lock:
            self._data.sales.append(sale)
            self._record_undo(lambda: self._withdraw(sale))

        logger.info(
            "Recorded sale %s: %s (%s, %d lines)",
            sale.id,
            sale.total,
            sale.payment_method.value,
            len(sale.items),
        )
        return sale

    def list(self) -> list[Sale]:
        with self._data.sales_lock:
            return list(self._data.sales)

    def _withdraw(self, sale: Sale) -> None:
        """Drop an uncommitted sale (used only by unit-of-work rollback)."""
        with self._data.sales_lock:
            self._data.sales.remove(sale)
