"""Tests for the naming convention on the shared `metadata`.

Deterministic constraint names keep Alembic autogenerate from producing
spurious drop/create pairs. The tests build throwaway tables on a
`MetaData` with the same convention so the application's tables stay
untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import (
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    UniqueConstraint,
    inspect,
)

from tendero.adapters.db.metadata import metadata

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

# pylint: disable=magic-value-comparison, redefined-outer-name


@pytest.fixture
def scratch_metadata() -> MetaData:
    """Empty MetaData sharing the application's naming convention."""
    return MetaData(naming_convention=metadata.naming_convention)


def test_index_names(sqlite_engine_memory: Engine, scratch_metadata):
    """Unnamed indexes are named ix_<table>_<columns>."""
    Table(
        "t_ix",
        scratch_metadata,
        Column("id", Integer, primary_key=True),
        Column("a", String, nullable=False),
        Column("b", Integer),
        Index(None, "a"),
        Index(None, "a", "b"),
    )
    scratch_metadata.create_all(sqlite_engine_memory)

    names = {ix["name"] for ix in inspect(sqlite_engine_memory).get_indexes("t_ix")}
    assert "ix_t_ix_t_ix_a" in names
    assert "ix_t_ix_t_ix_a_t_ix_b" in names


def test_unique_constraint_name(sqlite_engine_memory: Engine, scratch_metadata):
    """Unnamed unique constraints are named uq_<table>_<columns>."""
    Table(
        "t_uq",
        scratch_metadata,
        Column("id", Integer, primary_key=True),
        Column("a", String, nullable=False),
        UniqueConstraint("a"),
    )
    scratch_metadata.create_all(sqlite_engine_memory)

    inspector = inspect(sqlite_engine_memory)
    # SQLite may reflect UNIQUE constraints as unique indexes
    names = {ix["name"] for ix in inspector.get_indexes("t_uq")} | {
        uc.get("name") for uc in inspector.get_unique_constraints("t_uq")
    }
    assert "uq_t_uq_a" in names


def test_check_constraint_name(sqlite_engine_memory: Engine, scratch_metadata):
    """Named check constraints are prefixed with ck_<table>_."""
    Table(
        "t_ck",
        scratch_metadata,
        Column("id", Integer, primary_key=True),
        Column("a", Integer),
        CheckConstraint("a >= 0", name="nonneg"),
    )
    scratch_metadata.create_all(sqlite_engine_memory)

    checks = inspect(sqlite_engine_memory).get_check_constraints("t_ck")
    assert "ck_t_ck_nonneg" in {c.get("name") for c in checks}


def test_store_tables_use_the_convention(sqlite_engine_memory: Engine):
    """The application's own check constraints follow the convention."""
    checks = inspect(sqlite_engine_memory).get_check_constraints("products")
    assert {c.get("name") for c in checks} >= {
        "ck_products_non_negative_price",
        "ck_products_non_negative_stock",
    }
