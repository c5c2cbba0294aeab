from __future__ import annotations

from enum import Enum


class PartialOrdering(Enum):
    """Outcome of comparing two values under a partial order.

    Members:
        LESS: Left side is dominated by the right side.
        EQUIVALENT: Both sides are equal.
        GREATER: Left side dominates the right side.
        UNORDERED: Neither side dominates the other.
    """

    LESS = "LESS"
    EQUIVALENT = "EQUIVALENT"
    GREATER = "GREATER"
    UNORDERED = "UNORDERED"

    @property
    def is_eq(self) -> bool:
        return self is PartialOrdering.EQUIVALENT

    @property
    def is_lt(self) -> bool:
        return self is PartialOrdering.LESS

    @property
    def is_lteq(self) -> bool:
        return self is PartialOrdering.LESS or self is PartialOrdering.EQUIVALENT

    @property
    def is_gt(self) -> bool:
        return self is PartialOrdering.GREATER

    @property
    def is_gteq(self) -> bool:
        return self is PartialOrdering.GREATER or self is PartialOrdering.EQUIVALENT


class WeakOrdering(Enum):
    """Outcome of comparing two values under a total order.

    Unlike `PartialOrdering` there is no UNORDERED member: every pair compares.
    """

    LESS = "LESS"
    EQUIVALENT = "EQUIVALENT"
    GREATER = "GREATER"

    @classmethod
    def of(cls, left: int, right: int) -> WeakOrdering:
        """Compare two integers and return the matching member."""
        if left > right:
            return cls.GREATER
        if left < right:
            return cls.LESS
        return cls.EQUIVALENT

    @property
    def is_eq(self) -> bool:
        return self is WeakOrdering.EQUIVALENT

    @property
    def is_lt(self) -> bool:
        return self is WeakOrdering.LESS

    @property
    def is_lteq(self) -> bool:
        return self is not WeakOrdering.GREATER

    @property
    def is_gt(self) -> bool:
        return self is WeakOrdering.GREATER

    @property
    def is_gteq(self) -> bool:
        return self is not WeakOrdering.LESS
