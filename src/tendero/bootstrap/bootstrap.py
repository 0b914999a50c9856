"""Bootstrap the message bus with handlers, stores and collaborators."""

from __future__ import annotations

import functools
import inspect
import logging
import re
import unicodedata
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from tendero import config
from tendero.adapters.advisor import ContextSummaryAdvisor
from tendero.adapters.db.engine import make_engine
from tendero.adapters.memory import InMemoryStoreData
from tendero.adapters.snapshot_store import SqlAlchemySnapshotStore
from tendero.adapters.unit_of_work import InMemoryUnitOfWork
from tendero.domain.errors import ValidationError
from tendero.domain.models import StoreProfile
from tendero.domain.utils import require_text
from tendero.service_layer.coordinator import TransactionCoordinator
from tendero.service_layer.handlers import COMMAND_HANDLERS
from tendero.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from tendero.interfaces.advisor import Advisor
    from tendero.interfaces.id_generator import IdGenerator
    from tendero.interfaces.snapshot_store import SnapshotStore
    from tendero.interfaces.unit_of_work import AbstractUnitOfWork
    from tendero.service_layer.commands import Command

logger = logging.getLogger(__name__)

SESSION_SCOPED_WARNING = (
    "No persistence configured: data for store %s lives only for this "
    "session and is lost at logout"
)


@dataclass(frozen=True)
class AppContainer:
    """Everything an entrypoint needs to drive one store session."""

    message_bus: MessageBus
    uow: InMemoryUnitOfWork
    coordinator: TransactionCoordinator
    profile: StoreProfile

    @property
    def persistent(self) -> bool:
        """True when commits are saved to a snapshot store."""
        return self.uow.snapshot_store is not None


def store_slug(name: str) -> str:
    """Derive the store id from its name ("Tienda Doña Rosa" -> "tienda-dona-rosa")."""
    name = require_text(name, field="store_name")
    ascii_name = (
        unicodedata.normalize("NFKD", name.casefold())
        .encode("ascii", "ignore")
        .decode("ascii")
    )
    if not (slug := re.sub(r"[^a-z0-9]+", "-", ascii_name).strip("-")):
        raise ValidationError(
            f"Store name {name!r} needs at least one letter or digit",
            field="store_name",
        )
    return slug


def build_snapshot_store(url: str) -> SnapshotStore:
    """Build a database-backed snapshot store."""
    return SqlAlchemySnapshotStore(make_engine(url))


def build_uow(
    profile: StoreProfile,
    snapshot_store: SnapshotStore | None = None,
    id_generator: IdGenerator | None = None,
) -> InMemoryUnitOfWork:
    """Build the unit of work, seeded from the last saved snapshot if any."""
    data = InMemoryStoreData()
    if snapshot_store is None:
        logger.warning(SESSION_SCOPED_WARNING, profile.store_id)
    elif (snapshot := snapshot_store.load(profile.store_id)) is not None:
        data = InMemoryStoreData.from_snapshot(snapshot)
        logger.info(
            "Loaded store %s: %d products, %d customers, %d sales",
            profile.store_id,
            len(snapshot.products),
            len(snapshot.customers),
            len(snapshot.sales),
        )
    else:
        logger.info("Starting new store %s", profile.store_id)

    return InMemoryUnitOfWork(
        data, id_generator, snapshot_store=snapshot_store, profile=profile
    )


def build_message_bus(
    uow: AbstractUnitOfWork,
    command_handlers: dict[type[Command], Callable[..., Any]],
    dependencies: Mapping[str, object] | None = None,
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {"uow": uow, **(dependencies or {})}
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return MessageBus(
        uow,
        command_handlers=injected_command_handlers,
    )


def bootstrap(  # pylint: disable=too-many-arguments
    store_name: str,
    owner: str = "",
    *,
    db_url: str | None = None,
    snapshot_store: SnapshotStore | None = None,
    advisor: Advisor | None = None,
    advisor_timeout: float | None = None,
    low_stock_threshold: int | None = None,
    id_generator: IdGenerator | None = None,
) -> AppContainer:
    """Start a session for the store called ``store_name``.

    Persistence is on when ``snapshot_store`` is given, or when ``db_url``
    is given (a database-backed store is built for it). Otherwise the
    session starts empty and everything is lost when it ends; a WARNING
    says so.
    """
    if snapshot_store is None and db_url is not None:
        snapshot_store = build_snapshot_store(db_url)

    profile = StoreProfile(
        store_id=store_slug(store_name), name=store_name.strip(), owner=owner.strip()
    )
    uow = build_uow(profile, snapshot_store, id_generator)
    coordinator = TransactionCoordinator(uow)
    message_bus = build_message_bus(
        uow,
        COMMAND_HANDLERS,
        {
            "coordinator": coordinator,
            "low_stock_threshold": (
                low_stock_threshold
                if low_stock_threshold is not None
                else config.get_low_stock_threshold()
            ),
            "advisor": advisor or ContextSummaryAdvisor(),
            "advisor_timeout": (
                advisor_timeout
                if advisor_timeout is not None
                else config.get_advisor_timeout()
            ),
        },
    )

    return AppContainer(
        message_bus=message_bus,
        uow=uow,
        coordinator=coordinator,
        profile=profile,
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Bind the dependencies a handler asks for (by parameter name)."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return functools.partial(handler, **deps)
