from __future__ import annotations

import logging
import re
from types import NotImplementedType

from coinage.domain.monetary.denomination import Denomination
from coinage.domain.monetary.errors import ArithmeticOperation, OutOfRangeError
from coinage.domain.monetary.ordering import PartialOrdering
from coinage.utils.checked_math import addition_overflows, multiplication_overflows, subtraction_underflows
from coinage.utils.numeric_tools import as_coin_number

logger = logging.getLogger(__name__)

# Matches the output of `Moneybag.__str__`, e.g. "(1 livre, 2 soliduses, 0 deniers)"
_MONEYBAG_PATTERN = re.compile(r"^\(\s*([0-9]+)\s+(\w+)\s*,\s*([0-9]+)\s+(\w+)\s*,\s*([0-9]+)\s+(\w+)\s*\)$")

# Order of counters in a bag, and therefore in its text form
_COUNTER_ORDER = (Denomination.LIVRE, Denomination.SOLIDUS, Denomination.DENIER)


class Moneybag:
    """Immutable bag holding independent counts of livres, soliduses and deniers.

    Each counter is an unsigned 64-bit number, i.e. an `int` in [0, COIN_NUMBER_MAX].
    Counters are never converted into each other: a bag with 20 soliduses is
    not the same bag as one with 1 livre (compare their `Value` instead).

    Arithmetic is checked: any operation whose result would leave the counter
    range raises `OutOfRangeError` before a new bag is built, so operands stay
    untouched. Compound operators (`+=`, `-=`, `*=`) rebind the name to a new
    bag, which means a failed `bag += other` leaves `bag` exactly as it was.

    Bags are only partially ordered: a bag is greater than another when it holds
    at least as many coins of every kind. Pairs such as `Livre` and `Solidus` are
    unordered and answer False to every comparison operator.
    """

    __slots__ = ("_livres", "_soliduses", "_deniers")

    def __init__(self, livres: int, soliduses: int, deniers: int):
        """Initialize a bag from explicit coin counts.

        Args:
            livres (int): Number of livres.
            soliduses (int): Number of soliduses.
            deniers (int): Number of deniers.

        Raises:
            TypeError: If any count is not an `int`.
            ValueError: If any count lies outside [0, COIN_NUMBER_MAX].
        """
        object.__setattr__(self, "_livres", as_coin_number(livres, "livres"))
        object.__setattr__(self, "_soliduses", as_coin_number(soliduses, "soliduses"))
        object.__setattr__(self, "_deniers", as_coin_number(deniers, "deniers"))

    def __setattr__(self, name, value):
        raise AttributeError(f"Cannot set ${name} because `Moneybag` is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"Cannot delete ${name} because `Moneybag` is immutable")

    # region Accessors

    def livre_number(self) -> int:
        return self._livres

    def solidus_number(self) -> int:
        return self._soliduses

    def denier_number(self) -> int:
        return self._deniers

    def number_of(self, denomination: Denomination) -> int:
        """Return the count of coins of $denomination held in this bag."""
        if denomination is Denomination.LIVRE:
            return self._livres
        if denomination is Denomination.SOLIDUS:
            return self._soliduses
        if denomination is Denomination.DENIER:
            return self._deniers

        raise TypeError(f"$denomination must be a Denomination, but provided value is: {denomination!r}")

    # endregion

    # region Arithmetic

    def __add__(self, other: object) -> Moneybag | NotImplementedType:
        """Add bags field by field.

        Raises:
            OutOfRangeError: If any resulting counter would exceed COIN_NUMBER_MAX.
        """
        if not isinstance(other, Moneybag):
            return NotImplemented

        if addition_overflows(self._livres, other._livres) or addition_overflows(self._soliduses, other._soliduses) or addition_overflows(self._deniers, other._deniers):
            logger.debug(f"Rejected addition of {other!r} to {self!r}: a counter would overflow")
            raise OutOfRangeError(ArithmeticOperation.ADD, self, other)

        return Moneybag(self._livres + other._livres, self._soliduses + other._soliduses, self._deniers + other._deniers)

    def __sub__(self, other: object) -> Moneybag | NotImplementedType:
        """Subtract bags field by field.

        Raises:
            OutOfRangeError: If any counter of $other exceeds the matching counter of this bag.
        """
        if not isinstance(other, Moneybag):
            return NotImplemented

        if subtraction_underflows(self._livres, other._livres) or subtraction_underflows(self._soliduses, other._soliduses) or subtraction_underflows(self._deniers, other._deniers):
            logger.debug(f"Rejected subtraction of {other!r} from {self!r}: a counter would go negative")
            raise OutOfRangeError(ArithmeticOperation.SUBTRACT, self, other)

        return Moneybag(self._livres - other._livres, self._soliduses - other._soliduses, self._deniers - other._deniers)

    def __mul__(self, times: object) -> Moneybag | NotImplementedType:
        """Multiply every counter by the non-negative integer $times.

        Multiplying by zero always succeeds, whatever the counters hold.

        Raises:
            ValueError: If $times lies outside [0, COIN_NUMBER_MAX].
            OutOfRangeError: If any resulting counter would exceed COIN_NUMBER_MAX.
        """
        if isinstance(times, bool) or not isinstance(times, int):
            return NotImplemented
        times = as_coin_number(times, "times")

        if multiplication_overflows(self._livres, times) or multiplication_overflows(self._soliduses, times) or multiplication_overflows(self._deniers, times):
            logger.debug(f"Rejected multiplication of {self!r} by {times}: a counter would overflow")
            raise OutOfRangeError(ArithmeticOperation.MULTIPLY, self, times)

        return Moneybag(self._livres * times, self._soliduses * times, self._deniers * times)

    def __rmul__(self, times: object) -> Moneybag | NotImplementedType:
        """Right multiplication: `times * bag`."""
        return self.__mul__(times)

    # endregion

    def __bool__(self) -> bool:
        """Return True if the bag holds at least one coin."""
        return self._livres > 0 or self._soliduses > 0 or self._deniers > 0

    # region Comparison

    def compare(self, other: Moneybag) -> PartialOrdering:
        """Compare this bag with $other under the coin-wise partial order.

        Equality is tested first, so equal bags are never reported as GREATER.

        Args:
            other (Moneybag): Bag to compare against.

        Returns:
            PartialOrdering: EQUIVALENT, GREATER, LESS or UNORDERED.
        """
        if not isinstance(other, Moneybag):
            raise TypeError(f"$other must be a Moneybag, but provided value is: {other!r}")

        if self._livres == other._livres and self._soliduses == other._soliduses and self._deniers == other._deniers:
            return PartialOrdering.EQUIVALENT
        if self._livres >= other._livres and self._soliduses >= other._soliduses and self._deniers >= other._deniers:
            return PartialOrdering.GREATER
        if self._livres <= other._livres and self._soliduses <= other._soliduses and self._deniers <= other._deniers:
            return PartialOrdering.LESS
        return PartialOrdering.UNORDERED

    def __eq__(self, other: object) -> bool | NotImplementedType:
        if not isinstance(other, Moneybag):
            return NotImplemented
        return self.compare(other).is_eq

    def __lt__(self, other: object) -> bool | NotImplementedType:
        if not isinstance(other, Moneybag):
            return NotImplemented
        return self.compare(other).is_lt

    def __le__(self, other: object) -> bool | NotImplementedType:
        if not isinstance(other, Moneybag):
            return NotImplemented
        return self.compare(other).is_lteq

    def __gt__(self, other: object) -> bool | NotImplementedType:
        if not isinstance(other, Moneybag):
            return NotImplemented
        return self.compare(other).is_gt

    def __ge__(self, other: object) -> bool | NotImplementedType:
        if not isinstance(other, Moneybag):
            return NotImplemented
        return self.compare(other).is_gteq

    def __hash__(self) -> int:
        return hash((self._livres, self._soliduses, self._deniers))

    # endregion

    # region Copying

    def __copy__(self) -> Moneybag:
        return self

    def __deepcopy__(self, memo: dict) -> Moneybag:
        return self

    def __reduce__(self):
        return self.__class__, (self._livres, self._soliduses, self._deniers)

    # endregion

    # region String representations

    def __str__(self) -> str:
        """Return string like '(1 livre, 2 soliduses, 0 deniers)'."""
        parts = [f"{self.number_of(d)} {d.name_for(self.number_of(d))}" for d in _COUNTER_ORDER]
        return f"({', '.join(parts)})"

    def __repr__(self) -> str:
        """Return string like 'Moneybag(1, 2, 0)'."""
        return f"{self.__class__.__name__}({self._livres}, {self._soliduses}, {self._deniers})"

    @classmethod
    def from_str(cls, value_str: str) -> Moneybag:
        """Parse a bag from its string form, e.g. '(1 livre, 2 soliduses, 0 deniers)'.

        Coins must appear in the order livres, soliduses, deniers, and each unit
        name must agree with its count (singular only for exactly 1).

        Args:
            value_str (str): String representation as produced by `str(bag)`.

        Returns:
            Moneybag: Parsed bag.

        Raises:
            ValueError: If the string format is invalid or a count is out of range.
        """
        value_str = value_str.strip()
        if not value_str:
            raise ValueError("Value string with $value_str = '' cannot be empty")

        match = _MONEYBAG_PATTERN.match(value_str)
        if match is None:
            raise ValueError(f"Value string with $value_str = '{value_str}' must be in format '(<n> livres, <n> soliduses, <n> deniers)'")

        groups = match.groups()
        counts = []
        for expected, (count_part, name_part) in zip(_COUNTER_ORDER, zip(groups[0::2], groups[1::2])):
            try:
                denomination, is_plural = Denomination.from_name(name_part)
            except ValueError as e:
                raise ValueError(f"Invalid coin name '{name_part}' in string '{value_str}'") from e

            if denomination is not expected:
                raise ValueError(f"Expected {expected.plural} but found '{name_part}' in string '{value_str}'")

            count = int(count_part)
            if is_plural == (count == 1):
                raise ValueError(f"Coin name '{name_part}' does not agree with count {count} in string '{value_str}'")
            counts.append(count)

        return cls(*counts)

    # endregion
