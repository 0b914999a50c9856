"""Handlers that read the stores without writing to them."""

from collections.abc import Callable

from tendero.interfaces.unit_of_work import AbstractUnitOfWork
from tendero.service_layer import aggregation, commands


def show_dashboard(
    cmd: commands.ShowDashboard,  # pylint: disable=unused-argument
    uow: AbstractUnitOfWork,
    low_stock_threshold: int = aggregation.DEFAULT_LOW_STOCK_THRESHOLD,
) -> aggregation.DashboardStats:
    """Compute the dashboard from one consistent snapshot."""
    snapshot = uow.snapshot()
    return aggregation.dashboard(
        snapshot.products,
        snapshot.customers,
        snapshot.sales,
        low_stock_threshold=low_stock_threshold,
    )


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.ShowDashboard: show_dashboard,
}
