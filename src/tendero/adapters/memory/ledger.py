"""In-memory CustomerLedger implementation."""

from __future__ import annotations

import logging
from dataclasses import replace

from tendero.domain.errors import CustomerNotFoundError, ValidationError
from tendero.domain.models import Customer, Transaction, TransactionKind
from tendero.domain.utils import MoneyLike, positive_money, require_text
from tendero.interfaces.id_generator import IdGenerator
from tendero.interfaces.ledger import DEFAULT_DESCRIPTIONS, CustomerLedger

from .store import Clock, InMemoryStoreData, UndoRecorder, discard_undo, utc_now

logger = logging.getLogger(__name__)


class InMemoryCustomerLedger(CustomerLedger):
    """CustomerLedger backed by `InMemoryStoreData.customers`."""

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

    def add(self, name: str, phone: str) -> Customer:
        customer = Customer(
            id=self._ids.new_id(),
            name=require_text(name, field="name"),
            phone=(phone or "").strip(),
        )
        with self._data.customers_lock:
            self._data.customers[customer.id] = customer
            self._record_undo(lambda: self._data.customers.pop(customer.id, None))
        logger.debug("Opened account %s for %s", customer.id, customer.name)
        return customer

    def post_transaction(
        self,
        customer_id: str,
        amount: MoneyLike,
        kind: TransactionKind,
        description: str | None = None,
    ) -> Transaction:
        amount = positive_money(amount, field="amount")
        if not isinstance(kind, TransactionKind):
            raise ValidationError(
                f"kind must be one of {[k.value for k in TransactionKind]}",
                field="kind",
            )
        description = (description or "").strip() or DEFAULT_DESCRIPTIONS[kind]

        with self._data.customers_lock:
            head = self._data.customers.get(customer_id)
            if head is None:
                raise CustomerNotFoundError(customer_id)

            transaction = Transaction(
                id=self._ids.new_id(),
                timestamp=self._clock(),
                amount=amount,
                kind=kind,
                description=description,
            )
            self._data.customers[customer_id] = replace(
                head,
                current_debt=head.current_debt + transaction.signed_amount,
                history=(*head.history, transaction),
            )
            self._record_undo(lambda: self._reverse(customer_id, transaction))

        logger.info(
            "Posted %s of %s to %s; balance %s",
            kind.value,
            amount,
            customer_id,
            head.current_debt + transaction.signed_amount,
        )
        return transaction

    def find(self, customer_id: str) -> Customer | None:
        with self._data.customers_lock:
            return self._data.customers.get(customer_id)

    def list(self) -> list[Customer]:
        with self._data.customers_lock:
            return list(self._data.customers.values())

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #

    def _reverse(self, customer_id: str, transaction: Transaction) -> None:
        """Withdraw an uncommitted posting (used only by unit-of-work rollback)."""
        with self._data.customers_lock:
            customer = self._data.customers[customer_id]
            self._data.customers[customer_id] = replace(
                customer,
                current_debt=customer.current_debt - transaction.signed_amount,
                history=tuple(t for t in customer.history if t.id != transaction.id),
            )
