from __future__ import annotations

from types import NotImplementedType

from coinage.domain.monetary.denomination import Denomination
from coinage.domain.monetary.moneybag import Moneybag
from coinage.domain.monetary.ordering import WeakOrdering
from coinage.utils.numeric_tools import as_coin_number


class Value:
    """Total worth of a bag, expressed as a single count of deniers.

    Values are totally ordered and compare both with other values and with plain
    integers (interpreted as deniers). The count is held in a Python `int`, so the
    worth of even `Moneybag(MAX, MAX, MAX)` is represented exactly.
    """

    __slots__ = ("_denier_number",)

    def __init__(self, amount: int | Moneybag = 0):
        """Initialize Value from a raw denier count or from a `Moneybag`.

        Args:
            amount: Count of deniers in [0, COIN_NUMBER_MAX], or a bag to convert
                using the fixed exchange rates. Defaults to zero.

        Raises:
            TypeError: If $amount is neither an `int` nor a `Moneybag`.
            ValueError: If $amount is an `int` outside [0, COIN_NUMBER_MAX].
        """
        if isinstance(amount, Moneybag):
            denier_number = (
                amount.livre_number() * Denomination.LIVRE.deniers
                + amount.solidus_number() * Denomination.SOLIDUS.deniers
                + amount.denier_number() * Denomination.DENIER.deniers
            )
        else:
            denier_number = as_coin_number(amount, "amount")

        object.__setattr__(self, "_denier_number", denier_number)

    def __setattr__(self, name, value):
        raise AttributeError(f"Cannot set ${name} because `Value` is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"Cannot delete ${name} because `Value` is immutable")

    @property
    def denier_number(self) -> int:
        """Get the worth in deniers."""
        return self._denier_number

    def __int__(self) -> int:
        return self._denier_number

    # region Comparison

    def compare(self, other: Value | int) -> WeakOrdering:
        """Compare with another Value or with a plain count of deniers.

        Returns:
            WeakOrdering: LESS, EQUIVALENT or GREATER.

        Raises:
            TypeError: If $other is neither a `Value` nor an `int`.
        """
        other_number = _as_denier_number(other)
        if other_number is None:
            raise TypeError(f"$other must be a Value or an int, but provided value is: {other!r}")
        return WeakOrdering.of(self._denier_number, other_number)

    def __eq__(self, other: object) -> bool | NotImplementedType:
        other_number = _as_denier_number(other)
        if other_number is None:
            return NotImplemented
        return WeakOrdering.of(self._denier_number, other_number).is_eq

    def __lt__(self, other: object) -> bool | NotImplementedType:
        other_number = _as_denier_number(other)
        if other_number is None:
            return NotImplemented
        return WeakOrdering.of(self._denier_number, other_number).is_lt

    def __le__(self, other: object) -> bool | NotImplementedType:
        other_number = _as_denier_number(other)
        if other_number is None:
            return NotImplemented
        return WeakOrdering.of(self._denier_number, other_number).is_lteq

    def __gt__(self, other: object) -> bool | NotImplementedType:
        other_number = _as_denier_number(other)
        if other_number is None:
            return NotImplemented
        return WeakOrdering.of(self._denier_number, other_number).is_gt

    def __ge__(self, other: object) -> bool | NotImplementedType:
        other_number = _as_denier_number(other)
        if other_number is None:
            return NotImplemented
        return WeakOrdering.of(self._denier_number, other_number).is_gteq

    def __hash__(self) -> int:
        # Equal to the hash of the matching int, since `Value(5) == 5`
        return hash(self._denier_number)

    # endregion

    def __copy__(self) -> Value:
        return self

    def __deepcopy__(self, memo: dict) -> Value:
        return self

    def __reduce__(self):
        return _value_from_denier_number, (self._denier_number,)

    def __str__(self) -> str:
        """Return the count of deniers as plain decimal digits, e.g. '267'."""
        return str(self._denier_number)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._denier_number})"


def _as_denier_number(other: object) -> int | None:
    if isinstance(other, Value):
        return other._denier_number
    if isinstance(other, int) and not isinstance(other, bool):
        return other
    return None


def _value_from_denier_number(denier_number: int) -> Value:
    # Values converted from a bag can exceed the raw-input range, so unpickling bypasses validation
    value = Value.__new__(Value)
    object.__setattr__(value, "_denier_number", denier_number)
    return value
