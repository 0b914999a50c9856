"""Checkout: the one operation that changes every store at once.

`TransactionCoordinator.checkout` runs a cart through a small state machine::

    IDLE -> VALIDATING -> COMMITTING -> DONE
                  \\             \\
                   +-> REJECTED  +-> REJECTED

Validation reads live state and writes nothing. Committing happens inside
the unit of work, in this order:

1. reserve stock for every line (check-and-decrement per product);
2. record the sale in the journal;
3. for credit sales, post the debt to the customer's account.

Any failure in step 1-3 leaves the unit uncommitted and the unit of work
undoes whatever was already written, so a sale is never half applied.
Checkouts are serialized by a lock held across validation and commit.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from tendero.domain.errors import DomainError, OutOfStockError, ValidationError
from tendero.domain.models import (
    PaymentMethod,
    Product,
    Sale,
    SaleItem,
    TransactionKind,
    items_total,
)
from tendero.domain.utils import to_count
from tendero.interfaces.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)

#: Description of the ledger posting made for a credit sale.
CREDIT_SALE_DESCRIPTION = "Credit sale"


class CheckoutState(Enum):
    """Where a checkout is in its lifecycle."""

    IDLE = "idle"
    VALIDATING = "validating"
    COMMITTING = "committing"
    DONE = "done"
    REJECTED = "rejected"


@dataclass(frozen=True, slots=True)
class CartLine:
    """A product and how many units of it the customer is buying."""

    product_id: str
    quantity: int


class TransactionCoordinator:
    """Turns a cart into a journaled sale, stock decrements and a ledger posting.

    Args:
        uow: The unit of work whose stores the checkout writes to.

    Attributes:
        state: State of the most recent checkout (`CheckoutState.IDLE` until
            the first one runs).
    """

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self.uow = uow
        self.state = CheckoutState.IDLE
        self._lock = threading.Lock()

    def checkout(
        self,
        cart: Iterable[CartLine],
        payment_method: PaymentMethod | str,
        customer_id: str | None = None,
    ) -> Sale:
        """Sell the cart.

        Cash sales ignore ``customer_id``.

        Returns:
            The recorded sale.

        Raises:
            ValidationError: Empty cart, bad quantity, unknown payment method,
                credit sale without a customer, or a quantity above the
                stock on hand (`OutOfStockError`).
            NotFoundError: A product or the customer does not exist.
            ConcurrencyConflict: Stock changed between validation and commit.
        """
        with self._lock:
            self.state = CheckoutState.VALIDATING
            try:
                method, lines, customer_id = self._validate(
                    cart, payment_method, customer_id
                )
            except DomainError as e:
                self.state = CheckoutState.REJECTED
                logger.info("Checkout rejected: %s", e)
                raise

            items = tuple(
                SaleItem(
                    product_id=product.id,
                    product_name=product.name,
                    quantity=quantity,
                    price_at_sale=product.price,
                )
                for product, quantity in lines
            )
            total = items_total(items)

            self.state = CheckoutState.COMMITTING
            try:
                sale = self._commit(items, total, method, customer_id)
            except Exception:  # pylint: disable=broad-except
                self.state = CheckoutState.REJECTED
                logger.warning("Checkout of %s aborted; no store was changed", total)
                raise

            self.state = CheckoutState.DONE
            return sale

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #

    def _validate(
        self,
        cart: Iterable[CartLine],
        payment_method: PaymentMethod | str,
        customer_id: str | None,
    ) -> tuple[PaymentMethod, list[tuple[Product, int]], str | None]:
        try:
            method = PaymentMethod(payment_method)
        except ValueError as e:
            raise ValidationError(
                f"Unknown payment method {payment_method!r}", field="payment_method"
            ) from e

        quantities: dict[str, int] = {}
        for line in cart:
            quantity = to_count(line.quantity, field="quantity", minimum=1)
            quantities[line.product_id] = quantities.get(line.product_id, 0) + quantity
        if not quantities:
            raise ValidationError("The cart is empty", field="items")

        lines = []
        for product_id, quantity in quantities.items():
            product = self.uow.products.get(product_id)
            if quantity > product.stock:
                raise OutOfStockError(
                    product.id,
                    product.name,
                    requested=quantity,
                    available=product.stock,
                )
            lines.append((product, quantity))

        if method is PaymentMethod.CREDIT:
            if not customer_id:
                raise ValidationError(
                    "Select a customer for credit sales", field="customer_id"
                )
            self.uow.customers.get(customer_id)
        else:
            customer_id = None

        return method, lines, customer_id

    def _commit(
        self,
        items: tuple[SaleItem, ...],
        total: Decimal,
        method: PaymentMethod,
        customer_id: str | None,
    ) -> Sale:
        with self.uow:
            for item in items:
                self.uow.products.reserve_stock(item.product_id, item.quantity)
            sale = self.uow.sales.record(items, total, method, customer_id)
            if customer_id is not None:
                self.uow.customers.post_transaction(
                    customer_id, total, TransactionKind.DEBT, CREDIT_SALE_DESCRIPTION
                )
            self.uow.commit()
        logger.info("Checkout %s done: %s by %s", sale.id, total, method.value)
        return sale
