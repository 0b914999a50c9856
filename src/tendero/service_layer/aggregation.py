"""Read-side figures for the dashboard.

Every function here is pure: it takes snapshots (any iterable of frozen
records), keeps no state and tolerates empty input.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from tendero.domain.models import Customer, Product, Sale
from tendero.domain.utils import ZERO

DEFAULT_LOW_STOCK_THRESHOLD = 5
DEFAULT_TREND_LENGTH = 7


@dataclass(frozen=True, slots=True)
class TrendPoint:
    """One bar of the sales chart."""

    date: date
    amount: Decimal


@dataclass(frozen=True, slots=True)
class PaymentBreakdown:
    """Money already taken versus money still owed by customers."""

    paid: Decimal
    on_credit: Decimal

    @property
    def has_data(self) -> bool:
        """False when there is nothing to chart yet."""
        return self.paid != ZERO or self.on_credit != ZERO


@dataclass(frozen=True, slots=True)
class DashboardStats:
    """Everything the dashboard shows, computed in one pass."""

    total_sales: Decimal
    total_debt: Decimal
    low_stock_count: int
    sales_trend: tuple[TrendPoint, ...]
    breakdown: PaymentBreakdown
    product_count: int
    customer_count: int
    sale_count: int


def total_sales(sales: Iterable[Sale]) -> Decimal:
    """Sum of every sale's total."""
    return sum((s.total for s in sales), ZERO)


def total_debt(customers: Iterable[Customer]) -> Decimal:
    """Signed sum of customer debt; overpayments reduce it."""
    return sum((c.current_debt for c in customers), ZERO)


def low_stock_count(
    products: Iterable[Product], threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
) -> int:
    """Number of products whose stock is below ``threshold``."""
    return sum(1 for p in products if p.stock < threshold)


def sales_trend(
    sales: Sequence[Sale], n: int = DEFAULT_TREND_LENGTH
) -> list[TrendPoint]:
    """The last ``n`` sales as (date, amount) points, oldest first."""
    if n <= 0:
        return []
    ordered = sorted(sales, key=lambda s: s.timestamp)
    return [TrendPoint(date=s.sale_date, amount=s.total) for s in ordered[-n:]]


def payment_breakdown(
    sales: Iterable[Sale], customers: Iterable[Customer]
) -> PaymentBreakdown:
    """Split for the "paid vs. on credit" chart."""
    return PaymentBreakdown(paid=total_sales(sales), on_credit=total_debt(customers))


def dashboard(
    products: Sequence[Product],
    customers: Sequence[Customer],
    sales: Sequence[Sale],
    *,
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    trend_length: int = DEFAULT_TREND_LENGTH,
) -> DashboardStats:
    """Compute every dashboard figure from one set of snapshots."""
    return DashboardStats(
        total_sales=total_sales(sales),
        total_debt=total_debt(customers),
        low_stock_count=low_stock_count(products, low_stock_threshold),
        sales_trend=tuple(sales_trend(sales, trend_length)),
        breakdown=payment_breakdown(sales, customers),
        product_count=len(products),
        customer_count=len(customers),
        sale_count=len(sales),
    )
