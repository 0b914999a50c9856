"""Unit tests for the product catalog handlers."""

from decimal import Decimal

import pytest

from tendero.domain.errors import ProductNotFoundError, ValidationError
from tendero.interfaces.unsettable import UNSET
from tendero.service_layer import commands
from tests.unit.service_layer.handlers.base import HandlerTestBase

# pylint: disable=magic-value-comparison


class TestAddProduct(HandlerTestBase):
    """AddProduct creates a product and commits."""

    def test_adds_and_commits(self):
        """The returned product is stored and the unit committed."""
        product = self.bus.handle(commands.AddProduct("Arroz", "2500", 40, "Granos"))

        assert self.uow.products.get(product.id) == product
        assert product.price == Decimal("2500")
        self.assert_committed()

    def test_invalid_product_is_not_committed(self):
        """A negative price is rejected with nothing stored."""
        with pytest.raises(ValidationError, match="price cannot be negative"):
            self.bus.handle(commands.AddProduct("Arroz", -1, 40))

        assert self.uow.products.list() == []
        self.assert_not_committed()


class TestUpdateProduct(HandlerTestBase):
    """UpdateProduct patches a seeded product."""

    def _seed_bus(self, request) -> None:
        self.product = self.bus.handle(commands.AddProduct("Arroz", 2500, 40, "Granos"))

    def test_patch_changes_only_given_fields(self):
        """Fields left UNSET keep their values."""
        updated = self.bus.handle(
            commands.UpdateProduct(self.product.id, price=2700, stock=35)
        )

        assert (updated.price, updated.stock) == (Decimal("2700"), 35)
        assert (updated.name, updated.category) == ("Arroz", "Granos")
        self.assert_committed()

    def test_empty_patch_is_a_noop(self, caplog):
        """Nothing to change: no commit, the product comes back as is."""
        with caplog.at_level("DEBUG"):
            result = self.bus.handle(commands.UpdateProduct(self.product.id))

        assert result == self.product
        assert self.uow.commits == 0
        assert f"UpdateProduct {self.product.id}: no changes; noop" in caplog.text

    def test_invalid_patch_leaves_product_unchanged(self):
        """A rejected patch is rolled back."""
        with pytest.raises(ValidationError):
            self.bus.handle(commands.UpdateProduct(self.product.id, stock=-1))

        assert self.uow.products.get(self.product.id) == self.product
        self.assert_not_committed()

    def test_unknown_product(self):
        """Patching an unknown id raises ProductNotFoundError."""
        with pytest.raises(ProductNotFoundError):
            self.bus.handle(commands.UpdateProduct("nope", name="X"))

    def test_unset_is_the_default(self):
        """Commands default every patch field to UNSET."""
        cmd = commands.UpdateProduct(self.product.id)
        assert (cmd.name, cmd.price, cmd.stock, cmd.category) == (UNSET,) * 4


class TestRemoveProduct(HandlerTestBase):
    """RemoveProduct deletes a product but never past sales."""

    def _seed_bus(self, request) -> None:
        self.product = self.bus.handle(commands.AddProduct("Arroz", 2500, 40))

    def test_remove(self):
        """The product is gone and the removed record is returned."""
        removed = self.bus.handle(commands.RemoveProduct(self.product.id))

        assert removed == self.product
        assert self.uow.products.find(self.product.id) is None
        self.assert_committed()

    def test_remove_unknown(self):
        """Removing an unknown id is rejected."""
        with pytest.raises(ProductNotFoundError):
            self.bus.handle(commands.RemoveProduct("nope"))
        self.assert_not_committed()
