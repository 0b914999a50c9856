"""In-memory ProductCatalog implementation."""

from __future__ import annotations

import logging
from dataclasses import replace

from tendero.domain.errors import InsufficientStockError, ProductNotFoundError
from tendero.domain.models import DEFAULT_CATEGORY, Product
from tendero.domain.utils import MoneyLike, non_negative_money, require_text, to_count
from tendero.interfaces.catalog import ProductCatalog, ProductPatch
from tendero.interfaces.id_generator import IdGenerator

from .store import InMemoryStoreData, UndoRecorder, discard_undo

logger = logging.getLogger(__name__)


class InMemoryProductCatalog(ProductCatalog):
    """ProductCatalog backed by `InMemoryStoreData.products`."""

    def __init__(
        self,
        data: InMemoryStoreData,
        id_generator: IdGenerator,
        record_undo: UndoRecorder = discard_undo,
    ) -> None:
        self._data = data
        self._ids = id_generator
        self._record_undo = record_undo

    def add(
        self,
        name: str,
        price: MoneyLike,
        stock: int,
        category: str | None = DEFAULT_CATEGORY,
    ) -> Product:
        product = Product(
            id=self._ids.new_id(),
            name=require_text(name, field="name"),
            price=non_negative_money(price, field="price"),
            stock=to_count(stock, field="stock"),
            category=(category or "").strip() or DEFAULT_CATEGORY,
        )
        with self._data.products_lock:
            self._data.products[product.id] = product
            self._record_undo(lambda: self._data.products.pop(product.id, None))
        logger.debug("Added product %s (%s)", product.id, product.name)
        return product

    def update(self, product_id: str, patch: ProductPatch) -> Product:
        with self._data.products_lock:
            head = self._require(product_id)
            product = patch.apply_to(head)
            self._put(product, previous=head)
        logger.debug("Updated product %s", product_id)
        return product

    def remove(self, product_id: str) -> Product:
        with self._data.products_lock:
            product = self._require(product_id)
            del self._data.products[product_id]
            self._record_undo(lambda: self._restore(product))
        logger.debug("Removed product %s (%s)", product_id, product.name)
        return product

    def decrement_stock(self, product_id: str, quantity: int) -> Product:
        quantity = to_count(quantity, field="quantity", minimum=1)
        with self._data.products_lock:
            head = self._require(product_id)
            product = replace(head, stock=max(0, head.stock - quantity))
            self._data.products[product_id] = product
            taken = head.stock - product.stock
            self._record_undo(lambda: self._return_stock(product_id, taken))
        if quantity > head.stock:
            logger.warning(
                "Stock of %s clamped at 0 (had %d, asked to remove %d)",
                product_id,
                head.stock,
                quantity,
            )
        return product

    def reserve_stock(self, product_id: str, quantity: int) -> Product:
        quantity = to_count(quantity, field="quantity", minimum=1)
        with self._data.products_lock:
            head = self._require(product_id)
            if head.stock < quantity:
                raise InsufficientStockError(
                    product_id, head.name, requested=quantity, available=head.stock
                )
            return self.decrement_stock(product_id, quantity)

    def find(self, product_id: str) -> Product | None:
        with self._data.products_lock:
            return self._data.products.get(product_id)

    def list(self) -> list[Product]:
        with self._data.products_lock:
            return list(self._data.products.values())

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #

    def _require(self, product_id: str) -> Product:
        if (product := self._data.products.get(product_id)) is None:
            raise ProductNotFoundError(product_id)
        return product

    def _put(self, product: Product, previous: Product) -> None:
        self._data.products[product.id] = product
        self._record_undo(lambda: self._restore(previous))

    def _restore(self, product: Product) -> None:
        with self._data.products_lock:
            self._data.products[product.id] = product

    def _return_stock(self, product_id: str, units: int) -> None:
        with self._data.products_lock:
            if (product := self._data.products.get(product_id)) is not None:
                self._data.products[product_id] = replace(
                    product, stock=product.stock + units
                )
