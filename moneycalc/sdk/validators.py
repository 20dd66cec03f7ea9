"""Input sanitization and output rounding shared by every calculator.

Calculators never reject numeric input. Each engine passes its raw inputs
through these helpers at the entry boundary, so NaN, infinities and negative
amounts degrade to zero (or to a range bound) the same way everywhere.
Rounding to pence happens only when a result is built.
"""

import math


def finite_or_zero(value: float) -> float:
    """Return value unchanged if finite, else 0. Sign is preserved."""
    if value is None or not math.isfinite(value):
        return 0.0
    return value


def clamp_non_negative_finite(value: float) -> float:
    """Clamp to [0, +inf); NaN and infinities become 0.

    Example: -500 -> 0, nan -> 0, inf -> 0, 12.5 -> 12.5
    """
    value = finite_or_zero(value)
    return value if value > 0 else 0.0


def clamp_to_range(value: float, lo: float, hi: float) -> float:
    """Clamp to [lo, hi]; non-finite values become lo."""
    if value is None or not math.isfinite(value):
        return lo
    return min(max(value, lo), hi)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +inf (2.5 -> 3, -2.5 -> -2).

    Python's round() uses banker's rounding, which would turn 2.5 years
    into 2. Non-finite values round to 0.
    """
    if not math.isfinite(value):
        return 0
    return int(math.floor(value + 0.5))


def round_money(amount: float) -> float:
    """Round to 2 decimal places, halves toward +inf.

    Example: 3486.0000000000005 -> 3486.0, 0.125 -> 0.13
    Infinite amounts (unbounded runway) pass through unchanged, as do
    amounts too large to scale to pence (nothing to round at that size).
    """
    scaled = amount * 100
    if not math.isfinite(scaled):
        return amount
    return math.floor(scaled + 0.5) / 100
