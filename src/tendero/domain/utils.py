"""Coercion helpers for money amounts and unit counts.

Amounts are represented as `Decimal` throughout the domain. Inputs coming
from forms or the CLI may be `int`, `float`, `str` or `Decimal`; floats are
converted through their string form so ``0.1`` becomes ``Decimal("0.1")``
rather than its binary expansion.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from numbers import Real

from .errors import ValidationError

ZERO = Decimal("0")

#: Smallest money unit; amounts are stored with two fractional digits.
CENT = Decimal("0.01")

type MoneyLike = Decimal | int | float | str


def to_decimal(value: MoneyLike, *, field: str) -> Decimal:
    """Convert ``value`` to a finite `Decimal`.

    Raises:
        ValidationError: If the value is not a finite number (bools are rejected).
    """
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number", field=field)
    try:
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, float):
            result = Decimal(repr(value))
        else:
            result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as e:
        raise ValidationError(f"{field} must be a number", field=field) from e
    if not result.is_finite():
        raise ValidationError(f"{field} must be a finite number", field=field)
    return result


def to_money(value: MoneyLike, *, field: str) -> Decimal:
    """Convert ``value`` to a `Decimal` amount in whole cents.

    Raises:
        ValidationError: If the value is not a finite number or has more than
            two decimal places.
    """
    amount = to_decimal(value, field=field)
    try:
        whole_cents = amount == amount.quantize(CENT)
    except InvalidOperation as e:
        raise ValidationError(f"{field} is too large", field=field) from e
    if not whole_cents:
        raise ValidationError(
            f"{field} cannot have more than two decimal places", field=field
        )
    return amount


def non_negative_money(value: MoneyLike, *, field: str) -> Decimal:
    """Return ``value`` as a `Decimal` in whole cents, rejecting negatives."""
    amount = to_money(value, field=field)
    if amount < ZERO:
        raise ValidationError(f"{field} cannot be negative", field=field)
    return amount


def positive_money(value: MoneyLike, *, field: str) -> Decimal:
    """Return ``value`` as a `Decimal` in whole cents, rejecting zero or less."""
    amount = to_money(value, field=field)
    if amount <= ZERO:
        raise ValidationError(f"{field} must be greater than zero", field=field)
    return amount


def to_count(value: object, *, field: str, minimum: int = 0) -> int:
    """Convert ``value`` to an integral unit count of at least ``minimum``.

    Integral floats/Decimals (``3.0``) are accepted; fractional ones are not.
    """
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal, str)):
        raise ValidationError(f"{field} must be a whole number", field=field)
    number = to_decimal(value, field=field)  # type: ignore[arg-type]
    if number != number.to_integral_value():
        raise ValidationError(f"{field} must be a whole number", field=field)
    count = int(number)
    if count < minimum:
        if minimum == 0:
            raise ValidationError(f"{field} cannot be negative", field=field)
        raise ValidationError(f"{field} must be at least {minimum}", field=field)
    return count


def require_text(value: str | None, *, field: str) -> str:
    """Return ``value`` stripped, rejecting empty or whitespace-only text."""
    if value is None or not str(value).strip():
        raise ValidationError(f"{field} is required", field=field)
    return str(value).strip()
