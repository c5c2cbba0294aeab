from __future__ import annotations

from typing import TypeAlias

# Coin counters are unsigned 64-bit numbers
COIN_NUMBER_BITS = 64
COIN_NUMBER_MAX = (1 << COIN_NUMBER_BITS) - 1

# Use where a single coin counter (or a scalar applied to counters) is expected
CoinNumber: TypeAlias = int


def is_coin_number(value: object) -> bool:
    """Return True if $value is a plain `int` within [0, COIN_NUMBER_MAX].

    `bool` is rejected even though it subclasses `int`.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value <= COIN_NUMBER_MAX


def as_coin_number(value: object, name: str) -> CoinNumber:
    """Validate $value as a coin counter and return it unchanged.

    Args:
        value: Candidate counter.
        name: Parameter name used in error messages.

    Returns:
        The same integer.

    Raises:
        TypeError: If $value is not an `int` (or is a `bool`).
        ValueError: If $value lies outside [0, COIN_NUMBER_MAX].
    """
    if is_coin_number(value):
        return value

    # Invalid from here on; pick the error that describes why
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"${name} must be an int, but provided value is: {value!r}")

    if value < 0:
        raise ValueError(f"${name} cannot be negative, but provided value is: {value}")
    raise ValueError(f"${name} exceeds maximum allowed value {COIN_NUMBER_MAX}, but provided value is: {value}")
