"""Entities and value objects of the store.

Every record is a frozen dataclass. Stores never mutate a record in place;
they swap in a new instance (see `dataclasses.replace`) while holding their
lock, so any object handed out is a stable snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal
from enum import Enum

from .errors import ValidationError
from .utils import ZERO

# pylint: disable=too-many-instance-attributes

DEFAULT_CATEGORY = "General"


class PaymentMethod(Enum):
    """How a sale was settled."""

    CASH = "cash"
    CREDIT = "credit"


class TransactionKind(Enum):
    """Direction of a ledger posting."""

    DEBT = "debt"  # the customer took goods on credit
    PAYMENT = "payment"  # the customer paid some of it back


def _require_utc(value: datetime, what: str) -> None:
    if value.tzinfo is None or value.utcoffset() != timedelta(0):
        raise ValidationError(f"{what} timestamp must be timezone-aware UTC")


# ============================================================================
#                               Catalog
# ============================================================================


@dataclass(frozen=True, slots=True)
class Product:
    """A sellable product and its current stock level."""

    id: str
    name: str
    price: Decimal
    stock: int
    category: str = DEFAULT_CATEGORY

    def __post_init__(self) -> None:
        if self.price < ZERO:
            raise ValidationError("price cannot be negative", field="price")
        if self.stock < 0:
            raise ValidationError("stock cannot be negative", field="stock")


# ============================================================================
#                               Ledger
# ============================================================================


@dataclass(frozen=True, slots=True)
class Transaction:
    """An immutable ledger posting against a customer account."""

    id: str
    timestamp: datetime
    amount: Decimal
    kind: TransactionKind
    description: str

    def __post_init__(self) -> None:
        if self.amount <= ZERO:
            raise ValidationError("amount must be greater than zero", field="amount")
        _require_utc(self.timestamp, "transaction")

    @property
    def signed_amount(self) -> Decimal:
        """Effect of this posting on the customer's debt."""
        return self.amount if self.kind is TransactionKind.DEBT else -self.amount


@dataclass(frozen=True, slots=True)
class Customer:
    """A customer account with its running debt and posting history.

    ``current_debt`` is positive when the customer owes the store and
    negative when the store owes the customer (overpayment).
    """

    id: str
    name: str
    phone: str
    current_debt: Decimal = ZERO
    history: tuple[Transaction, ...] = ()

    def balance_from_history(self) -> Decimal:
        """Recompute the debt from the posting history."""
        return sum((t.signed_amount for t in self.history), ZERO)


# ============================================================================
#                               Journal
# ============================================================================


@dataclass(frozen=True, slots=True)
class SaleItem:
    """One line of a sale.

    ``product_name`` and ``price_at_sale`` are copied from the catalog at
    checkout, so the line stays meaningful after the product is edited or
    removed.
    """

    product_id: str
    product_name: str
    quantity: int
    price_at_sale: Decimal

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValidationError("quantity must be at least 1", field="quantity")
        if self.price_at_sale < ZERO:
            raise ValidationError(
                "price_at_sale cannot be negative", field="price_at_sale"
            )

    @property
    def subtotal(self) -> Decimal:
        """Line total."""
        return self.price_at_sale * self.quantity


def items_total(items: tuple[SaleItem, ...] | list[SaleItem]) -> Decimal:
    """Sum of the line subtotals."""
    return sum((item.subtotal for item in items), ZERO)


@dataclass(frozen=True, slots=True)
class Sale:
    """A completed sale as recorded in the journal."""

    id: str
    timestamp: datetime
    total: Decimal
    items: tuple[SaleItem, ...]
    payment_method: PaymentMethod
    customer_id: str | None = None

    def __post_init__(self) -> None:
        if not self.items:
            raise ValidationError("a sale needs at least one item", field="items")
        if self.total != items_total(self.items):
            raise ValidationError(
                f"sale total {self.total} does not match items total "
                f"{items_total(self.items)}",
                field="total",
            )
        if self.payment_method is PaymentMethod.CREDIT and not self.customer_id:
            raise ValidationError(
                "Select a customer for credit sales", field="customer_id"
            )
        if self.payment_method is PaymentMethod.CASH and self.customer_id:
            raise ValidationError(
                "cash sales cannot reference a customer", field="customer_id"
            )
        _require_utc(self.timestamp, "sale")

    @property
    def sale_date(self) -> date:
        """Calendar date (UTC) of the sale."""
        return self.timestamp.date()


# ============================================================================
#                               Store snapshot
# ============================================================================


@dataclass(frozen=True, slots=True)
class StoreProfile:
    """Identity of the store the session is running for."""

    store_id: str
    name: str
    owner: str = ""


@dataclass(frozen=True, slots=True)
class StoreSnapshot:
    """Point-in-time copy of everything the store holds."""

    products: tuple[Product, ...] = ()
    customers: tuple[Customer, ...] = ()
    sales: tuple[Sale, ...] = ()
    profile: StoreProfile | None = None
