"""Numeric helpers shared by the analytics modules.

Display values are rounded on the exact binary value of the float with ties
going away from zero, so the same input always renders the same digits.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal


def clamp(value: float, lower: float, upper: float) -> float:
    return min(upper, max(lower, value))


def sigmoid(value: float) -> float:
    if value >= 0:
        return 1.0 / (1.0 + math.exp(-value))
    # exp(-value) overflows for large negative inputs.
    exp_value = math.exp(value)
    return exp_value / (1.0 + exp_value)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""

    return int(math.floor(value + 0.5))


def to_fixed(value: float, digits: int) -> float:
    """Round ``value`` to ``digits`` decimals for display."""

    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
