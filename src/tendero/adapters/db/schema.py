"""SQLAlchemy Core tables for persisted store snapshots.

Every row carries its ``store_id`` so several stores can share one
database. Rows also carry a ``position`` column recording the order in
which entities were added; snapshots are rebuilt in that order.
"""

from __future__ import annotations

import sqlalchemy as sa

from .metadata import metadata
from .sa_types import MONEY, UTCDateTime

ID = sa.String(length=64)

stores = sa.Table(
    "stores",
    metadata,
    sa.Column("store_id", sa.String(length=100), primary_key=True),
    sa.Column("name", sa.String(length=200), nullable=False),
    sa.Column("owner", sa.String(length=200), nullable=False, server_default=""),
    sa.Column("saved_at", UTCDateTime(), nullable=False),
    comment="One row per store; saved_at is the time of the last snapshot.",
)

products = sa.Table(
    "products",
    metadata,
    sa.Column(
        "store_id",
        sa.String(length=100),
        sa.ForeignKey("stores.store_id", ondelete="CASCADE"),
        primary_key=True,
    ),
    sa.Column("id", ID, primary_key=True),
    sa.Column("position", sa.Integer(), nullable=False),
    sa.Column("name", sa.String(length=200), nullable=False),
    sa.Column("price", MONEY, nullable=False),
    sa.Column("stock", sa.Integer(), nullable=False),
    sa.Column("category", sa.String(length=100), nullable=False),
    sa.CheckConstraint("price >= 0", name="non_negative_price"),
    sa.CheckConstraint("stock >= 0", name="non_negative_stock"),
)

customers = sa.Table(
    "customers",
    metadata,
    sa.Column(
        "store_id",
        sa.String(length=100),
        sa.ForeignKey("stores.store_id", ondelete="CASCADE"),
        primary_key=True,
    ),
    sa.Column("id", ID, primary_key=True),
    sa.Column("position", sa.Integer(), nullable=False),
    sa.Column("name", sa.String(length=200), nullable=False),
    sa.Column("phone", sa.String(length=50), nullable=False),
    sa.Column("current_debt", MONEY, nullable=False),
)

customer_transactions = sa.Table(
    "customer_transactions",
    metadata,
    sa.Column("store_id", sa.String(length=100), primary_key=True),
    sa.Column("id", ID, primary_key=True),
    sa.Column("customer_id", ID, nullable=False),
    sa.Column("position", sa.Integer(), nullable=False),
    sa.Column("timestamp", UTCDateTime(), nullable=False),
    sa.Column("amount", MONEY, nullable=False),
    sa.Column("kind", sa.String(length=20), nullable=False),
    sa.Column("description", sa.String(length=200), nullable=False),
    sa.ForeignKeyConstraint(
        ["store_id", "customer_id"],
        ["customers.store_id", "customers.id"],
        ondelete="CASCADE",
    ),
    sa.CheckConstraint("amount > 0", name="positive_amount"),
    sa.Index("ix_customer_transactions_customer", "store_id", "customer_id"),
)

sales = sa.Table(
    "sales",
    metadata,
    sa.Column(
        "store_id",
        sa.String(length=100),
        sa.ForeignKey("stores.store_id", ondelete="CASCADE"),
        primary_key=True,
    ),
    sa.Column("id", ID, primary_key=True),
    sa.Column("position", sa.Integer(), nullable=False),
    sa.Column("timestamp", UTCDateTime(), nullable=False),
    sa.Column("total", MONEY, nullable=False),
    sa.Column("payment_method", sa.String(length=20), nullable=False),
    sa.Column("customer_id", ID, nullable=True),
    comment="Append-only sales journal.",
)

# No foreign key to products: a product may be deleted while its sales remain.
sale_items = sa.Table(
    "sale_items",
    metadata,
    sa.Column("store_id", sa.String(length=100), primary_key=True),
    sa.Column("sale_id", ID, primary_key=True),
    sa.Column("line_no", sa.Integer(), primary_key=True),
    sa.Column("product_id", ID, nullable=False),
    sa.Column("product_name", sa.String(length=200), nullable=False),
    sa.Column("quantity", sa.Integer(), nullable=False),
    sa.Column("price_at_sale", MONEY, nullable=False),
    sa.ForeignKeyConstraint(
        ["store_id", "sale_id"],
        ["sales.store_id", "sales.id"],
        ondelete="CASCADE",
    ),
    sa.CheckConstraint("quantity > 0", name="positive_quantity"),
)

#: Child tables first, the order rows must be deleted in.
DELETE_ORDER = (sale_items, sales, customer_transactions, customers, products)
