"""Errors raised by coinage arithmetic."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from coinage.domain.monetary.moneybag import Moneybag


class ArithmeticOperation(Enum):
    """Arithmetic operation that can leave the coin counter range."""

    ADD = "ADD"  # Sum of a field exceeds the counter maximum
    SUBTRACT = "SUBTRACT"  # A field would go negative
    MULTIPLY = "MULTIPLY"  # Product of a field and the scalar exceeds the counter maximum


_DESCRIPTIONS = {
    ArithmeticOperation.ADD: "adding another moneybag",
    ArithmeticOperation.SUBTRACT: "subtracting another moneybag",
    ArithmeticOperation.MULTIPLY: "multiplying moneybag",
}


class OutOfRangeError(ValueError):
    """Raised when an arithmetic operation on a `Moneybag` leaves the counter range.

    The operands are never modified when this error is raised.
    """

    def __init__(self, operation: ArithmeticOperation, left: Moneybag, right: Moneybag | int):
        self.operation = operation
        self.left = left
        self.right = right

        super().__init__(f"Out of range while {_DESCRIPTIONS[operation]}: $left = {left}, $right = {right}")
