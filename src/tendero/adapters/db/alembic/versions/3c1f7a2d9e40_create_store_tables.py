"""Create store snapshot tables

Revision ID: 3c1f7a2d9e40
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

from tendero.adapters.db.sa_types import MONEY, UTCDateTime

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3c1f7a2d9e40"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "stores",
        sa.Column("store_id", sa.String(length=100), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("owner", sa.String(length=200), nullable=False, server_default=""),
        sa.Column("saved_at", UTCDateTime(), nullable=False),
        sa.PrimaryKeyConstraint("store_id", name=op.f("pk_stores")),
        comment="One row per store; saved_at is the time of the last snapshot.",
    )
    op.create_table(
        "products",
        sa.Column("store_id", sa.String(length=100), nullable=False),
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("price", MONEY, nullable=False),
        sa.Column("stock", sa.Integer(), nullable=False),
        sa.Column("category", sa.String(length=100), nullable=False),
        sa.CheckConstraint("price >= 0", name=op.f("ck_products_non_negative_price")),
        sa.CheckConstraint("stock >= 0", name=op.f("ck_products_non_negative_stock")),
        sa.ForeignKeyConstraint(
            ["store_id"],
            ["stores.store_id"],
            name=op.f("fk_products_store_id_stores"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("store_id", "id", name=op.f("pk_products")),
    )
    op.create_table(
        "customers",
        sa.Column("store_id", sa.String(length=100), nullable=False),
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("phone", sa.String(length=50), nullable=False),
        sa.Column("current_debt", MONEY, nullable=False),
        sa.ForeignKeyConstraint(
            ["store_id"],
            ["stores.store_id"],
            name=op.f("fk_customers_store_id_stores"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("store_id", "id", name=op.f("pk_customers")),
    )
    op.create_table(
        "customer_transactions",
        sa.Column("store_id", sa.String(length=100), nullable=False),
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("customer_id", sa.String(length=64), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("timestamp", UTCDateTime(), nullable=False),
        sa.Column("amount", MONEY, nullable=False),
        sa.Column("kind", sa.String(length=20), nullable=False),
        sa.Column("description", sa.String(length=200), nullable=False),
        sa.CheckConstraint(
            "amount > 0", name=op.f("ck_customer_transactions_positive_amount")
        ),
        sa.ForeignKeyConstraint(
            ["store_id", "customer_id"],
            ["customers.store_id", "customers.id"],
            name=op.f("fk_customer_transactions_store_id_customer_id_customers"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint(
            "store_id", "id", name=op.f("pk_customer_transactions")
        ),
    )
    op.create_index(
        "ix_customer_transactions_customer",
        "customer_transactions",
        ["store_id", "customer_id"],
        unique=False,
    )
    op.create_table(
        "sales",
        sa.Column("store_id", sa.String(length=100), nullable=False),
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("timestamp", UTCDateTime(), nullable=False),
        sa.Column("total", MONEY, nullable=False),
        sa.Column("payment_method", sa.String(length=20), nullable=False),
        sa.Column("customer_id", sa.String(length=64), nullable=True),
        sa.ForeignKeyConstraint(
            ["store_id"],
            ["stores.store_id"],
            name=op.f("fk_sales_store_id_stores"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("store_id", "id", name=op.f("pk_sales")),
        comment="Append-only sales journal.",
    )
    op.create_table(
        "sale_items",
        sa.Column("store_id", sa.String(length=100), nullable=False),
        sa.Column("sale_id", sa.String(length=64), nullable=False),
        sa.Column("line_no", sa.Integer(), nullable=False),
        sa.Column("product_id", sa.String(length=64), nullable=False),
        sa.Column("product_name", sa.String(length=200), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("price_at_sale", MONEY, nullable=False),
        sa.CheckConstraint("quantity > 0", name=op.f("ck_sale_items_positive_quantity")),
        sa.ForeignKeyConstraint(
            ["store_id", "sale_id"],
            ["sales.store_id", "sales.id"],
            name=op.f("fk_sale_items_store_id_sale_id_sales"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint(
            "store_id", "sale_id", "line_no", name=op.f("pk_sale_items")
        ),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("sale_items")
    op.drop_table("sales")
    op.drop_index(
        "ix_customer_transactions_customer", table_name="customer_transactions"
    )
    op.drop_table("customer_transactions")
    op.drop_table("customers")
    op.drop_table("products")
    op.drop_table("stores")
