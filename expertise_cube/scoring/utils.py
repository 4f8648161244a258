"""
Decimal Utilities
expertise_cube/scoring/utils.py

Precision-safe decimal math for the expertise formulas.
"""

import re
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Sequence

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def to_decimal(value: float, places: Optional[int] = None) -> Decimal:
    """Convert a number to Decimal via its string form, optionally quantized."""
    result = Decimal(str(value))
    if places is not None:
        result = result.quantize(Decimal(10) ** -places, rounding=ROUND_HALF_UP)
    return result


def clamp(
    value: Decimal,
    min_val: Decimal = Decimal("0"),
    max_val: Decimal = Decimal("10"),
) -> Decimal:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def mean(values: Sequence[Decimal]) -> Decimal:
    """Arithmetic mean. Raises ValueError on an empty sequence."""
    if not values:
        raise ValueError("mean() requires at least one value")
    return sum(values, Decimal("0")) / Decimal(len(values))


def normalize_weights(weights: List[Decimal]) -> List[Decimal]:
    """
    Scale weights so they sum to 1.

    Raises ValueError if the total is not positive.
    """
    total = sum(weights, Decimal("0"))
    if total <= 0:
        raise ValueError(f"weights must have a positive total, got {total}")
    return [w / total for w in weights]


def parse_leading_int(text: Optional[str]) -> Optional[int]:
    """
    Read the integer at the start of text, ignoring leading whitespace.

    "6 months" -> 6, "12-month contract" -> 12, "about 6 months" -> None.
    """
    if not text:
        return None
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None
