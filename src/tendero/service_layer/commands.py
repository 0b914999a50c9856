"""Module defining Commands."""

from dataclasses import dataclass

from tendero.domain.models import DEFAULT_CATEGORY, PaymentMethod, TransactionKind
from tendero.domain.utils import MoneyLike
from tendero.interfaces.unsettable import UNSET, Unsettable

from .coordinator import CartLine


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


# --- Catalog ---


@dataclass(frozen=True)
class AddProduct(Command):
    """Command to add a product to the catalog."""

    name: str
    price: MoneyLike
    stock: int
    category: str | None = DEFAULT_CATEGORY


@dataclass(frozen=True)
class UpdateProduct(Command):
    """Command to patch an existing product; UNSET fields are left alone."""

    product_id: str
    name: Unsettable[str] = UNSET
    price: Unsettable[MoneyLike] = UNSET
    stock: Unsettable[int] = UNSET
    category: Unsettable[str] = UNSET


@dataclass(frozen=True)
class RemoveProduct(Command):
    """Command to delete a product. Past sales keep their copy of it."""

    product_id: str


# --- Ledger ---


@dataclass(frozen=True)
class AddCustomer(Command):
    """Command to open a customer account."""

    name: str
    phone: str = ""


@dataclass(frozen=True)
class PostTransaction(Command):
    """Command to post a manual debt ("fiar") or payment ("pagar")."""

    customer_id: str
    amount: MoneyLike
    kind: TransactionKind
    description: str | None = None


# --- Sales ---


@dataclass(frozen=True)
class Checkout(Command):
    """Command to sell a cart."""

    lines: tuple[CartLine, ...]
    payment_method: PaymentMethod | str
    customer_id: str | None = None


# --- Advisor ---


@dataclass(frozen=True)
class AskAdvisor(Command):
    """Command to ask the advisor a question about the store."""

    query: str


# --- Reports ---


@dataclass(frozen=True)
class ShowDashboard(Command):
    """Command to compute the dashboard figures from the current state."""
