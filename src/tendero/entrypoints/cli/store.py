"""Store commands: read the persisted state of a store.

Both commands need ``TENDERO_DB_URL`` and an up-to-date schema. They load
the last saved snapshot of the store and never write to it.
"""

from __future__ import annotations

import click

from tendero import config
from tendero.bootstrap import AppContainer, SnapshotStoreError, bootstrap
from tendero.domain.errors import ValidationError
from tendero.service_layer import commands

from .db import UPGRADE_SCHEMA_INSTRUCTIONS, MigrationStatus, get_url, migration_status
from .helpers import format_money, warn

store_option = click.option(
    "--store",
    "store_name",
    required=True,
    envvar="TENDERO_STORE",
    show_envvar=True,
    help="Name of the store (as registered).",
)


def _open_store(store_name: str) -> AppContainer:
    url = get_url()
    state, _ = migration_status(url)
    if state is not MigrationStatus.UP_TO_DATE:
        raise click.ClickException(
            f"The database schema is {state.value}. {UPGRADE_SCHEMA_INSTRUCTIONS}"
        )
    try:
        container = bootstrap(store_name, db_url=url)
    except ValidationError as e:
        raise click.BadParameter(str(e), param_hint="--store") from e
    except (config.ConfigError, SnapshotStoreError) as e:
        raise click.ClickException(str(e)) from e
    data = container.uow.data
    if not (data.products or data.customers or data.sales):
        warn(f"No saved data for store {container.profile.store_id!r}")
    return container


@click.command()
@store_option
def dashboard(store_name: str) -> None:
    """Show the dashboard figures of a store."""
    container = _open_store(store_name)
    stats = container.message_bus.handle(commands.ShowDashboard())

    click.secho(container.profile.name, bold=True)
    click.echo(f"Total sales     : {format_money(stats.total_sales)}")
    click.echo(f"Total on credit : {format_money(stats.total_debt)}")
    click.echo(f"Low stock       : {stats.low_stock_count} product(s)")
    click.echo(
        f"Records         : {stats.product_count} products, "
        f"{stats.customer_count} customers, {stats.sale_count} sales"
    )
    if stats.sales_trend:
        click.echo("Last sales      :")
        for point in stats.sales_trend:
            click.echo(f"  {point.date.isoformat()}  {format_money(point.amount)}")


@click.command()
@store_option
@click.argument("query", nargs=-1, required=True)
def ask(store_name: str, query: tuple[str, ...]) -> None:
    """Ask the store advisor a question."""
    container = _open_store(store_name)
    click.echo(container.message_bus.handle(commands.AskAdvisor(" ".join(query))))
