"""Service layer handlers."""

from collections.abc import Callable

from .catalog_handlers import COMMAND_HANDLERS as CATALOG_COMMAND_HANDLERS
from .ledger_handlers import COMMAND_HANDLERS as LEDGER_COMMAND_HANDLERS
from .report_handlers import COMMAND_HANDLERS as REPORT_COMMAND_HANDLERS
from .sales_handlers import COMMAND_HANDLERS as SALES_COMMAND_HANDLERS

__all__ = ["COMMAND_HANDLERS"]

COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    **CATALOG_COMMAND_HANDLERS,
    **LEDGER_COMMAND_HANDLERS,
    **REPORT_COMMAND_HANDLERS,
    **SALES_COMMAND_HANDLERS,
}
