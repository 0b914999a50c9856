"""Tri-state handling for patch fields.

This module defines the ``UNSET`` sentinel, the `Unsettable` type alias,
and the `resolve` helper for applying partial updates to stored records.

A field of type ``Unsettable[T]`` can take three states:

* ``UNSET``: the field is intentionally left unchanged in a patch.
* ``None``: the field is explicitly cleared (only if allowed).
* concrete ``T``: the field is explicitly updated to a new value.

Using this tri-state convention lets patches distinguish between omission,
explicit clearing, and explicit setting of a value.
"""

from dataclasses import dataclass
from typing import TypeVar

from tendero.domain.errors import ValidationError


def _get_unset() -> "_UnsetType":
    # Factory used by pickle to retrieve the one true instance.
    return UNSET


@dataclass(frozen=True)
class _UnsetType:
    """Sentinel to mark fields intentionally left unset in patches.

    This is distinct from `None`, which indicates an explicit clearing of a value.
    """

    def __bool__(self) -> bool:  # falsy to simplify conditionals
        return False

    def __repr__(self) -> str:
        return "UNSET"

    def __reduce__(self):  # keep singleton on pickle
        return (_get_unset, ())


# Singleton instance
UNSET = _UnsetType()

T = TypeVar("T")
type Unsettable[T] = T | _UnsetType | None


def is_unset(value: object) -> bool:
    """Return True if ``value`` is the ``UNSET`` sentinel."""
    return isinstance(value, _UnsetType)


def resolve(
    value: T | None | _UnsetType,
    current: T,
    *,
    field: str,
    cleared: T | None = None,
) -> T:
    """Resolve a tri-state value against the current value.

    Args:
        value: The new value from the patch (may be UNSET, None, or a concrete value).
        current: The current value of the stored record.
        field: The name of the field (for error messages).
        cleared: Value to fall back to when the field is cleared. When None,
            the field cannot be cleared.

    Returns:
        The concrete value if one was given, the current value if UNSET,
        or ``cleared`` if the field was cleared.

    Raises:
        ValidationError: If attempting to clear a non-clearable field.
    """
    if isinstance(value, _UnsetType):
        return current
    if value is None:
        if cleared is None:
            raise ValidationError(f"{field} cannot be cleared", field=field)
        return cleared
    return value
