"""Handlers for checkout and the advisor."""

from collections.abc import Callable

from tendero.domain.models import Sale
from tendero.interfaces.advisor import Advisor
from tendero.interfaces.unit_of_work import AbstractUnitOfWork
from tendero.service_layer import commands
from tendero.service_layer.advisor import ask_advisor
from tendero.service_layer.coordinator import TransactionCoordinator


def checkout(cmd: commands.Checkout, coordinator: TransactionCoordinator) -> Sale:
    """Sell a cart through the coordinator."""
    return coordinator.checkout(cmd.lines, cmd.payment_method, cmd.customer_id)


def ask(
    cmd: commands.AskAdvisor,
    uow: AbstractUnitOfWork,
    advisor: Advisor,
    advisor_timeout: float | None = None,
) -> str:
    """Answer a question about the store; never fails on advisor errors."""
    return ask_advisor(advisor, cmd.query, uow.snapshot(), timeout=advisor_timeout)


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.Checkout: checkout,
    commands.AskAdvisor: ask,
}
