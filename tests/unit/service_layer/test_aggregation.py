"""Unit tests for the dashboard aggregation functions."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from tests.fixtures.datagen import T0
from tendero.domain.models import PaymentMethod
from tendero.service_layer import aggregation

# pylint: disable=magic-value-comparison


def test_everything_is_zero_for_an_empty_store():
    """Empty inputs give zeros and an empty trend, never an error."""
    stats = aggregation.dashboard((), (), ())

    assert stats.total_sales == Decimal("0")
    assert stats.total_debt == Decimal("0")
    assert stats.low_stock_count == 0
    assert stats.sales_trend == ()
    assert not stats.breakdown.has_data
    assert (stats.product_count, stats.customer_count, stats.sale_count) == (0, 0, 0)


def test_total_sales_counts_cash_and_credit(make_sale):
    """Every sale counts, however it was paid."""
    sales = [
        make_sale(1000),
        make_sale(2500, 500, payment_method=PaymentMethod.CREDIT, customer_id="C1"),
    ]
    assert aggregation.total_sales(sales) == Decimal("4000")


def test_total_debt_nets_overpayments(make_customer):
    """Customers in credit reduce the total owed."""
    customers = [make_customer(5000), make_customer(1000, -1500)]
    assert aggregation.total_debt(customers) == Decimal("4500")


@pytest.mark.parametrize("threshold, expected", [(5, 2), (1, 1), (0, 0), (11, 4)])
def test_low_stock_count_is_strictly_below_threshold(
    make_product, threshold, expected
):
    """Stock equal to the threshold is not low."""
    products = [make_product(stock=s) for s in (0, 4, 5, 10)]
    assert aggregation.low_stock_count(products, threshold) == expected


def test_sales_trend_takes_last_n_in_time_order(make_sale):
    """The trend is the last n sales by timestamp, oldest first."""
    sales = [
        make_sale(100 * (i + 1), timestamp=T0 + timedelta(days=i)) for i in range(10)
    ]
    shuffled = sales[5:] + sales[:5]

    trend = aggregation.sales_trend(shuffled, 3)

    assert [p.amount for p in trend] == [Decimal(800), Decimal(900), Decimal(1000)]
    assert [p.date for p in trend] == [
        date(2025, 3, 8),
        date(2025, 3, 9),
        date(2025, 3, 10),
    ]


@pytest.mark.parametrize("n", [0, -1])
def test_sales_trend_of_nothing(make_sale, n):
    """A non-positive length gives an empty trend."""
    assert aggregation.sales_trend([make_sale()], n) == []


def test_sales_trend_shorter_than_n(make_sale):
    """With fewer sales than n, every sale is a point."""
    assert len(aggregation.sales_trend([make_sale(), make_sale()])) == 2


def test_payment_breakdown(make_sale, make_customer):
    """Paid is the sales total, on credit is the outstanding debt."""
    breakdown = aggregation.payment_breakdown(
        [make_sale(3000)], [make_customer(1200)]
    )
    assert breakdown == aggregation.PaymentBreakdown(
        paid=Decimal("3000"), on_credit=Decimal("1200")
    )
    assert breakdown.has_data


def test_dashboard_combines_figures(make_product, make_customer, make_sale):
    """The dashboard is the individual figures computed over one snapshot."""
    products = [make_product(stock=2), make_product(stock=30)]
    customers = [make_customer(3000)]
    sales = [make_sale(1000) for _ in range(9)]

    stats = aggregation.dashboard(
        products, customers, sales, low_stock_threshold=3, trend_length=7
    )

    assert stats.total_sales == Decimal("9000")
    assert stats.total_debt == Decimal("3000")
    assert stats.low_stock_count == 1
    assert len(stats.sales_trend) == 7
    assert stats.breakdown.paid == stats.total_sales
    assert (stats.product_count, stats.customer_count, stats.sale_count) == (2, 1, 9)
