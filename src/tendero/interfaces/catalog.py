"""Interface for the Product Catalog."""

from __future__ import annotations

import abc
from dataclasses import dataclass

from tendero.domain.errors import ProductNotFoundError
from tendero.domain.models import DEFAULT_CATEGORY, Product
from tendero.domain.utils import MoneyLike, non_negative_money, require_text, to_count

from .unsettable import UNSET, Unsettable, resolve

# --- Write Models ---


@dataclass(frozen=True, slots=True)
class ProductPatch:
    """Partial update for a product.

    Fields left as ``UNSET`` keep their current value. Clearing ``category``
    (``None``) puts the product back in the default category; the other
    fields cannot be cleared.
    """

    name: Unsettable[str] = UNSET
    price: Unsettable[MoneyLike] = UNSET
    stock: Unsettable[int] = UNSET
    category: Unsettable[str] = UNSET

    def apply_to(self, head: Product) -> Product:
        """Return ``head`` with this patch applied and validated."""

        name = resolve(self.name, head.name, field="name")
        price = resolve(self.price, head.price, field="price")
        stock = resolve(self.stock, head.stock, field="stock")
        category = resolve(
            self.category, head.category, field="category", cleared=DEFAULT_CATEGORY
        )
        return Product(
            id=head.id,
            name=require_text(name, field="name"),
            price=non_negative_money(price, field="price"),
            stock=to_count(stock, field="stock"),
            category=(category or "").strip() or DEFAULT_CATEGORY,
        )

    def is_empty(self) -> bool:
        """True when the patch changes nothing."""
        return all(
            getattr(self, name) is UNSET
            for name in ("name", "price", "stock", "category")
        )


# --- Interface ---


class ProductCatalog(abc.ABC):
    """Owns product records and their stock levels."""

    @abc.abstractmethod
    def add(
        self,
        name: str,
        price: MoneyLike,
        stock: int,
        category: str | None = DEFAULT_CATEGORY,
    ) -> Product:
        """Create a product with a fresh id.

        Raises:
            ValidationError: If price or stock is negative or not a finite number,
                stock is fractional, or name is blank.
        """

    @abc.abstractmethod
    def update(self, product_id: str, patch: ProductPatch) -> Product:
        """Apply a partial update.

        Raises:
            ProductNotFoundError: If the product does not exist.
            ValidationError: If the merged record is invalid.
        """

    @abc.abstractmethod
    def remove(self, product_id: str) -> Product:
        """Remove a product and return the removed record.

        Sales already journaled are unaffected; their lines carry the product
        name and price.

        Raises:
            ProductNotFoundError: If the product does not exist.
        """

    @abc.abstractmethod
    def decrement_stock(self, product_id: str, quantity: int) -> Product:
        """Lower stock by ``quantity``, clamping at zero.

        Raises:
            ProductNotFoundError: If the product does not exist.
        """

    @abc.abstractmethod
    def reserve_stock(self, product_id: str, quantity: int) -> Product:
        """Atomically check that ``quantity`` units are available and take them.

        Raises:
            ProductNotFoundError: If the product does not exist.
            InsufficientStockError: If live stock is below ``quantity``.
        """

    @abc.abstractmethod
    def find(self, product_id: str) -> Product | None:
        """Return the product, or None if unknown."""

    @abc.abstractmethod
    def list(self) -> list[Product]:
        """Return all products in insertion order."""

    def get(self, product_id: str) -> Product:
        """Return the product or raise `ProductNotFoundError`."""
        if (product := self.find(product_id)) is None:
            raise ProductNotFoundError(product_id)
        return product

    def low_stock(self, threshold: int) -> list[Product]:
        """Products with ``stock < threshold``."""
        return [p for p in self.list() if p.stock < threshold]

    def search(self, term: str) -> list[Product]:
        """Products whose name contains ``term`` (case-insensitive)."""
        needle = term.strip().casefold()
        return [p for p in self.list() if needle in p.name.casefold()]

    def categories(self) -> list[str]:
        """Distinct categories in first-seen order."""
        return list(dict.fromkeys(p.category for p in self.list()))

    def by_category(self, category: str) -> list[Product]:
        """Products filed under ``category``."""
        return [p for p in self.list() if p.category == category]
