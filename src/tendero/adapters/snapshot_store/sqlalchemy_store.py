"""SQLAlchemy-backed SnapshotStore adapter.

`save` replaces every row belonging to a store inside a single database
transaction, so a snapshot is either fully written or not at all, and
saving the same snapshot twice leaves identical rows. `load` rebuilds the
snapshot with every collection in its original order.

Database errors are mapped to `SnapshotStoreError` (bad data) and
`SnapshotStoreUnavailableError` (connection/operational problems).
Rows that no longer form valid records on load are reported as
`SnapshotStoreError` too.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import DBAPIError, IntegrityError

from tendero.adapters.db import schema
from tendero.domain.errors import ValidationError
from tendero.domain.models import (
    Customer,
    PaymentMethod,
    Product,
    Sale,
    SaleItem,
    StoreProfile,
    StoreSnapshot,
    Transaction,
    TransactionKind,
)
from tendero.interfaces.snapshot_store import (
    SnapshotStore,
    SnapshotStoreError,
    SnapshotStoreUnavailableError,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class SqlAlchemySnapshotStore(SnapshotStore):
    """SnapshotStore over the tables in `tendero.adapters.db.schema`."""

    def __init__(self, engine: Engine):
        self.engine = engine

    # --------------------------------------------------------------------- #
    # Interface implementation
    # --------------------------------------------------------------------- #

    def save(self, store_id: str, snapshot: StoreSnapshot) -> None:
        profile = snapshot.profile or StoreProfile(store_id=store_id, name=store_id)
        try:
            with self.engine.begin() as conn:
                for table in schema.DELETE_ORDER:
                    conn.execute(delete(table).where(table.c.store_id == store_id))
                conn.execute(
                    delete(schema.stores).where(schema.stores.c.store_id == store_id)
                )
                conn.execute(
                    insert(schema.stores).values(
                        store_id=store_id,
                        name=profile.name,
                        owner=profile.owner,
                        saved_at=datetime.now(timezone.utc),
                    )
                )
                self._insert_rows(conn, store_id, snapshot)
        except IntegrityError as e:
            raise SnapshotStoreError(str(e.orig or e)) from e
        except DBAPIError as e:
            raise SnapshotStoreUnavailableError(str(e)) from e

    def load(self, store_id: str) -> StoreSnapshot | None:
        try:
            with self.engine.connect() as conn:
                store = (
                    conn.execute(
                        select(schema.stores).where(
                            schema.stores.c.store_id == store_id
                        )
                    )
                    .mappings()
                    .one_or_none()
                )
                if store is None:
                    return None
                return StoreSnapshot(
                    products=self._load_products(conn, store_id),
                    customers=self._load_customers(conn, store_id),
                    sales=self._load_sales(conn, store_id),
                    profile=StoreProfile(
                        store_id=store_id, name=store["name"], owner=store["owner"]
                    ),
                )
        except DBAPIError as e:
            raise SnapshotStoreUnavailableError(str(e)) from e
        except ValidationError as e:
            raise SnapshotStoreError(
                f"Saved data of store {store_id} is not valid: {e}"
            ) from e

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #

    @staticmethod
    def _insert_rows(conn: Connection, store_id: str, snapshot: StoreSnapshot) -> None:
        products = [
            {
                "store_id": store_id,
                "id": p.id,
                "position": pos,
                "name": p.name,
                "price": p.price,
                "stock": p.stock,
                "category": p.category,
            }
            for pos, p in enumerate(snapshot.products)
        ]
        customers = [
            {
                "store_id": store_id,
                "id": c.id,
                "position": pos,
                "name": c.name,
                "phone": c.phone,
                "current_debt": c.current_debt,
            }
            for pos, c in enumerate(snapshot.customers)
        ]
        transactions = [
            {
                "store_id": store_id,
                "id": t.id,
                "customer_id": c.id,
                "position": pos,
                "timestamp": t.timestamp,
                "amount": t.amount,
                "kind": t.kind.value,
                "description": t.description,
            }
            for c in snapshot.customers
            for pos, t in enumerate(c.history)
        ]
        sales = [
            {
                "store_id": store_id,
                "id": s.id,
                "position": pos,
                "timestamp": s.timestamp,
                "total": s.total,
                "payment_method": s.payment_method.value,
                "customer_id": s.customer_id,
            }
            for pos, s in enumerate(snapshot.sales)
        ]
        items = [
            {
                "store_id": store_id,
                "sale_id": s.id,
                "line_no": line_no,
                "product_id": i.product_id,
                "product_name": i.product_name,
                "quantity": i.quantity,
                "price_at_sale": i.price_at_sale,
            }
            for s in snapshot.sales
            for line_no, i in enumerate(s.items)
        ]

        for table, rows in (
            (schema.products, products),
            (schema.customers, customers),
            (schema.customer_transactions, transactions),
            (schema.sales, sales),
            (schema.sale_items, items),
        ):
            if rows:
                conn.execute(insert(table), rows)

    @staticmethod
    def _load_products(conn: Connection, store_id: str) -> tuple[Product, ...]:
        t = schema.products
        rows = conn.execute(
            select(t).where(t.c.store_id == store_id).order_by(t.c.position)
        ).mappings()
        return tuple(
            Product(
                id=r["id"],
                name=r["name"],
                price=r["price"],
                stock=r["stock"],
                category=r["category"],
            )
            for r in rows
        )

    @staticmethod
    def _load_customers(conn: Connection, store_id: str) -> tuple[Customer, ...]:
        t = schema.customer_transactions
        history: dict[str, list[Transaction]] = defaultdict(list)
        for r in conn.execute(
            select(t)
            .where(t.c.store_id == store_id)
            .order_by(t.c.customer_id, t.c.position)
        ).mappings():
            history[r["customer_id"]].append(
                Transaction(
                    id=r["id"],
                    timestamp=r["timestamp"],
                    amount=r["amount"],
                    kind=TransactionKind(r["kind"]),
                    description=r["description"],
                )
            )

        c = schema.customers
        rows = conn.execute(
            select(c).where(c.c.store_id == store_id).order_by(c.c.position)
        ).mappings()
        return tuple(
            Customer(
                id=r["id"],
                name=r["name"],
                phone=r["phone"],
                current_debt=r["current_debt"],
                history=tuple(history[r["id"]]),
            )
            for r in rows
        )

    @staticmethod
    def _load_sales(conn: Connection, store_id: str) -> tuple[Sale, ...]:
        t = schema.sale_items
        items: dict[str, list[SaleItem]] = defaultdict(list)
        for r in conn.execute(
            select(t).where(t.c.store_id == store_id).order_by(t.c.sale_id, t.c.line_no)
        ).mappings():
            items[r["sale_id"]].append(
                SaleItem(
                    product_id=r["product_id"],
                    product_name=r["product_name"],
                    quantity=r["quantity"],
                    price_at_sale=r["price_at_sale"],
                )
            )

        s = schema.sales
        rows = conn.execute(
            select(s).where(s.c.store_id == store_id).order_by(s.c.position)
        ).mappings()
        return tuple(
            Sale(
                id=r["id"],
                timestamp=r["timestamp"],
                total=r["total"],
                items=tuple(items[r["id"]]),
                payment_method=PaymentMethod(r["payment_method"]),
                customer_id=r["customer_id"],
            )
            for r in rows
        )
