"""
Decimal Utilities
grade_report/scoring/utils.py

Precision-safe decimal math for the grading calculations.
"""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, getcontext
from typing import Optional, Sequence, Union

# Plain ASCII decimal or scientific notation only.
_PLAIN_NUMBER = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def parse_decimal(text: str) -> Optional[Decimal]:
    """
    Parse ``text`` as a finite Decimal.

    Returns None for anything that is not a plain finite number
    (empty strings, words, ``NaN``, ``Infinity``, digit separators and
    non-ASCII digits).
    """
    if not isinstance(text, str):
        return None
    text = text.strip()
    if not _PLAIN_NUMBER.fullmatch(text):
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


def round_half_up(value: Decimal, places: int = 2) -> Decimal:
    """Round to ``places`` decimals, halves away from zero."""
    return value.quantize(Decimal(10) ** -places, rounding=ROUND_HALF_UP)


def clamp_upper(value: Decimal, max_val: Decimal = Decimal("100")) -> Decimal:
    """Cap value at max_val. There is no lower bound."""
    return min(max_val, value)


def in_range(value: Decimal, min_val: Decimal, max_val: Decimal) -> bool:
    """Inclusive range check."""
    return min_val <= value <= max_val


def population_std_dev(values: Sequence[Decimal], mean: Decimal) -> Decimal:
    """
    Calculate population standard deviation.

    Formula: sqrt(Σ(value_i - mean)² / n)
    """
    if not values:
        return Decimal("0")

    variance = sum((v - mean) ** 2 for v in values) / len(values)
    return variance.sqrt()


def to_json_number(value: Decimal) -> Union[int, float]:
    """Render a Decimal as an int when integral, else as a float."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def working_precision(values: Sequence[Decimal], guard: int = 10) -> int:
    """
    Context precision large enough to sum ``values`` exactly.

    Never lower than the current context precision.
    """
    if not values:
        return getcontext().prec
    top = max(v.adjusted() for v in values)
    bottom = min(v.as_tuple().exponent for v in values)
    span = top - bottom + 1
    return max(getcontext().prec, span + len(str(len(values))) + guard)
