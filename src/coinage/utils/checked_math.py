from __future__ import annotations

from coinage.utils.numeric_tools import COIN_NUMBER_MAX, CoinNumber


def addition_overflows(augend: CoinNumber, addend: CoinNumber) -> bool:
    """Return True if $augend + $addend would exceed COIN_NUMBER_MAX.

    The check never computes the sum itself.

    Examples:
        >>> addition_overflows(COIN_NUMBER_MAX, 0)
        False
        >>> addition_overflows(COIN_NUMBER_MAX, 1)
        True
    """
    return addend > COIN_NUMBER_MAX - augend


def subtraction_underflows(minuend: CoinNumber, subtrahend: CoinNumber) -> bool:
    """Return True if $minuend - $subtrahend would go below zero."""
    return subtrahend > minuend


def multiplication_overflows(multiplicand: CoinNumber, times: CoinNumber) -> bool:
    """Return True if $multiplicand * $times would exceed COIN_NUMBER_MAX.

    Compares against `COIN_NUMBER_MAX // times` instead of forming the product.
    Multiplying by zero never overflows and is answered without dividing.

    Examples:
        >>> multiplication_overflows(COIN_NUMBER_MAX, 0)
        False
        >>> multiplication_overflows(COIN_NUMBER_MAX, 1)
        False
        >>> multiplication_overflows(COIN_NUMBER_MAX // 2 + 1, 2)
        True
    """
    if times == 0:
        return False
    return multiplicand > COIN_NUMBER_MAX // times
