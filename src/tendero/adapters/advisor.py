"""Offline advisor that answers from the store summary alone."""

from collections.abc import Sequence

from tendero.domain.models import Customer, Product, Sale
from tendero.interfaces.advisor import Advisor, build_advisor_context

# pylint: disable=too-few-public-methods


class ContextSummaryAdvisor(Advisor):
    """Advisor that needs no network: it replies with the store summary.

    It does not interpret the question. The reply repeats it, then gives
    the same summary whatever was asked. Useful as a default when no
    language model is configured, and in tests.
    """

    def __init__(self, greeting: str = "Here is how the store looks right now:"):
        self.greeting = greeting

    def advise(
        self,
        query: str,
        products: Sequence[Product],
        customers: Sequence[Customer],
        sales: Sequence[Sale],
    ) -> str:
        context = build_advisor_context(products, customers, sales)
        lines = [self.greeting, context.render()]
        if query := query.strip():
            lines.insert(0, f"You asked: {query}")
        if context.low_stock:
            lines.append(f"Consider restocking {context.low_stock[0]} first.")
        return "\n".join(lines)
