"""Handlers for product catalog management."""

import logging
from collections.abc import Callable

from tendero.domain.models import Product
from tendero.interfaces.catalog import ProductPatch
from tendero.interfaces.unit_of_work import AbstractUnitOfWork
from tendero.service_layer import commands

logger = logging.getLogger(__name__)


def add_product(cmd: commands.AddProduct, uow: AbstractUnitOfWork) -> Product:
    """Add a product to the catalog."""
    with uow:
        product = uow.products.add(cmd.name, cmd.price, cmd.stock, cmd.category)
        uow.commit()
    return product


def update_product(cmd: commands.UpdateProduct, uow: AbstractUnitOfWork) -> Product:
    """Apply a patch to an existing product."""
    patch = ProductPatch(
        name=cmd.name,
        price=cmd.price,
        stock=cmd.stock,
        category=cmd.category,
    )

    with uow:
        if patch.is_empty():
            logger.debug("UpdateProduct %s: no changes; noop", cmd.product_id)
            return uow.products.get(cmd.product_id)

        product = uow.products.update(cmd.product_id, patch)
        uow.commit()
    return product


def remove_product(cmd: commands.RemoveProduct, uow: AbstractUnitOfWork) -> Product:
    """Delete a product; journaled sales are not touched."""
    with uow:
        product = uow.products.remove(cmd.product_id)
        uow.commit()
    return product


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.AddProduct: add_product,
    commands.UpdateProduct: update_product,
    commands.RemoveProduct: remove_product,
}
