"""Contract tests for CustomerLedger adapters."""

import concurrent.futures as cf
from decimal import Decimal

import pytest

from tendero.domain.errors import CustomerNotFoundError, ValidationError
from tendero.domain.models import TransactionKind

# pylint: disable=magic-value-comparison


def test_add_opens_empty_account(ledger):
    """New customers owe nothing and have no history."""
    customer = ledger.add(" Rosa ", " 300 123 4567 ")
    assert (customer.name, customer.phone) == ("Rosa", "300 123 4567")
    assert customer.current_debt == Decimal("0")
    assert customer.history == ()
    assert ledger.get(customer.id) == customer


def test_add_requires_name(ledger):
    """A blank name is rejected."""
    with pytest.raises(ValidationError, match="name is required"):
        ledger.add("  ", "300")


def test_debt_then_payment(ledger):
    """Debt 5000 then payment 2000 leaves 3000 and two postings."""
    customer = ledger.add("Rosa", "")
    ledger.post_transaction(customer.id, 5000, TransactionKind.DEBT, "Fiado")
    ledger.post_transaction(customer.id, 2000, TransactionKind.PAYMENT)

    customer = ledger.get(customer.id)
    assert customer.current_debt == Decimal("3000")
    assert [t.kind for t in customer.history] == [
        TransactionKind.DEBT,
        TransactionKind.PAYMENT,
    ]
    assert [t.description for t in customer.history] == ["Fiado", "Account payment"]


def test_overpayment_goes_negative(ledger):
    """Payments are not floored at zero."""
    customer = ledger.add("Rosa", "")
    ledger.post_transaction(customer.id, 1000, TransactionKind.DEBT)
    ledger.post_transaction(customer.id, 1500, TransactionKind.PAYMENT)
    assert ledger.get(customer.id).current_debt == Decimal("-500")


def test_posting_timestamps_are_utc_and_ordered(ledger):
    """Postings are stamped with the clock, in order."""
    customer = ledger.add("Rosa", "")
    first = ledger.post_transaction(customer.id, 100, TransactionKind.DEBT)
    second = ledger.post_transaction(customer.id, 100, TransactionKind.DEBT)
    assert first.timestamp.tzinfo is not None
    assert first.timestamp < second.timestamp


@pytest.mark.parametrize("amount", [0, -100, "abc", "NaN", "0.001", "10.505"])
def test_post_rejects_bad_amounts(ledger, amount):
    """Non-positive or non-numeric amounts are rejected without a posting."""
    customer = ledger.add("Rosa", "")
    with pytest.raises(ValidationError):
        ledger.post_transaction(customer.id, amount, TransactionKind.DEBT)
    assert ledger.get(customer.id).history == ()


def test_post_rejects_unknown_kind(ledger):
    """Only DEBT and PAYMENT postings exist."""
    customer = ledger.add("Rosa", "")
    with pytest.raises(ValidationError) as excinfo:
        ledger.post_transaction(customer.id, 100, "gift")
    assert excinfo.value.field == "kind"


def test_post_to_unknown_customer(ledger):
    """Posting to an unknown id raises CustomerNotFoundError."""
    with pytest.raises(CustomerNotFoundError):
        ledger.post_transaction("nope", 100, TransactionKind.DEBT)


def test_concurrent_postings_lose_no_update(ledger):
    """Parallel postings to one account all land."""
    customer = ledger.add("Rosa", "")

    def _post(i: int) -> None:
        kind = TransactionKind.DEBT if i % 2 == 0 else TransactionKind.PAYMENT
        ledger.post_transaction(customer.id, 10, kind)

    with cf.ThreadPoolExecutor(max_workers=16) as ex:
        list(ex.map(_post, range(401)))

    customer = ledger.get(customer.id)
    assert len(customer.history) == 401
    assert customer.current_debt == Decimal("10")
    assert customer.current_debt == customer.balance_from_history()


def test_read_helpers(ledger):
    """Outstanding debt, search and top debtors read the current accounts."""
    ana = ledger.add("Ana", "")
    luis = ledger.add("Luis", "")
    rosa = ledger.add("Rosa", "")
    ledger.post_transaction(ana.id, 1000, TransactionKind.DEBT)
    ledger.post_transaction(rosa.id, 5000, TransactionKind.DEBT)
    ledger.post_transaction(luis.id, 300, TransactionKind.PAYMENT)

    assert ledger.total_outstanding_debt() == Decimal("5700")
    assert [c.name for c in ledger.search("ROS")] == ["Rosa"]
    assert [c.name for c in ledger.top_debtors(2)] == ["Rosa", "Ana"]
