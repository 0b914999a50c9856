"""Handlers for customer accounts."""

from collections.abc import Callable

from tendero.domain.models import Customer, Transaction
from tendero.interfaces.unit_of_work import AbstractUnitOfWork
from tendero.service_layer import commands


def add_customer(cmd: commands.AddCustomer, uow: AbstractUnitOfWork) -> Customer:
    """Open a customer account."""
    with uow:
        customer = uow.customers.add(cmd.name, cmd.phone)
        uow.commit()
    return customer


def post_transaction(
    cmd: commands.PostTransaction, uow: AbstractUnitOfWork
) -> Transaction:
    """Post a manual debt or payment to a customer's account."""
    with uow:
        transaction = uow.customers.post_transaction(
            cmd.customer_id, cmd.amount, cmd.kind, cmd.description
        )
        uow.commit()
    return transaction


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.AddCustomer: add_customer,
    commands.PostTransaction: post_transaction,
}
