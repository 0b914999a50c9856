"""Interface for the natural-language store advisor.

The advisor only ever sees tuples of frozen records, never the stores
themselves, so it has no way to write. `build_advisor_context` condenses those tuples into
the summary every advisor works from.
"""

import abc
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

from tendero.domain.models import Customer, Product, Sale

# pylint: disable=too-few-public-methods


class AdvisorError(Exception):
    """Raised by advisors that cannot produce an answer."""


class Advisor(abc.ABC):
    """Contract for an advisor answering questions about the store."""

    @abc.abstractmethod
    def advise(
        self,
        query: str,
        products: Sequence[Product],
        customers: Sequence[Customer],
        sales: Sequence[Sale],
    ) -> str:
        """Answer ``query`` given snapshots of the store's data."""


# --- Context ---

#: Products below this stock level are called out to the advisor.
ADVISOR_LOW_STOCK_THRESHOLD = 5

#: How many debtors the advisor is told about.
ADVISOR_TOP_DEBTORS = 3


@dataclass(frozen=True, slots=True)
class AdvisorContext:
    """The summary of the store an advisor bases its answer on."""

    low_stock: tuple[str, ...]
    top_debtors: tuple[tuple[str, Decimal], ...]
    recent_sales_total: Decimal

    def render(self) -> str:
        """Render the context as the plain-text block sent with a query."""
        low_stock = ", ".join(self.low_stock) or "None"
        debtors = (
            ", ".join(f"{name} (${debt})" for name, debt in self.top_debtors)
            or "None"
        )
        return (
            f"- Products running low: {low_stock}\n"
            f"- Customers owing the most: {debtors}\n"
            f"- Recent sales (total): ${self.recent_sales_total}"
        )


def build_advisor_context(
    products: Sequence[Product],
    customers: Sequence[Customer],
    sales: Sequence[Sale],
) -> AdvisorContext:
    """Summarize the snapshots the way every advisor sees them."""
    debtors = sorted(customers, key=lambda c: c.current_debt, reverse=True)
    return AdvisorContext(
        low_stock=tuple(
            p.name for p in products if p.stock < ADVISOR_LOW_STOCK_THRESHOLD
        ),
        top_debtors=tuple(
            (c.name, c.current_debt) for c in debtors[:ADVISOR_TOP_DEBTORS]
        ),
        recent_sales_total=sum((s.total for s in sales), Decimal("0")),
    )
