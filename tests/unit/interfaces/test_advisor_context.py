"""Unit tests for the advisor context summary."""

from decimal import Decimal

from tendero.interfaces.advisor import AdvisorContext, build_advisor_context

# pylint: disable=magic-value-comparison


def test_empty_store_context():
    """An empty store renders "None" placeholders and a zero total."""
    context = build_advisor_context((), (), ())
    assert context == AdvisorContext((), (), Decimal("0"))
    assert context.render() == (
        "- Products running low: None\n"
        "- Customers owing the most: None\n"
        "- Recent sales (total): $0"
    )


def test_context_summarizes_store(make_product, make_customer, make_sale):
    """Low stock under 5, the top three debtors and the summed sales."""
    products = [
        make_product(name="Arroz", stock=2),
        make_product(name="Sal", stock=5),
        make_product(name="Jabon", stock=0),
    ]
    customers = [
        make_customer(1000, name="Ana"),
        make_customer(5000, name="Rosa"),
        make_customer(200, name="Luis"),
        make_customer(3000, name="Marta"),
    ]
    sales = [make_sale(1000, 500), make_sale(2000)]

    context = build_advisor_context(products, customers, sales)

    assert context.low_stock == ("Arroz", "Jabon")
    assert context.top_debtors == (
        ("Rosa", Decimal("5000")),
        ("Marta", Decimal("3000")),
        ("Ana", Decimal("1000")),
    )
    assert context.recent_sales_total == Decimal("3500")
    assert context.render() == (
        "- Products running low: Arroz, Jabon\n"
        "- Customers owing the most: Rosa ($5000), Marta ($3000), Ana ($1000)\n"
        "- Recent sales (total): $3500"
    )
