"""Money / rounding helpers.

Amounts travel as strings with exactly two fractional digits; these helpers
are the single place that parses and renders them.
"""

from __future__ import annotations
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

CENT = Decimal("0.01")


def quantize_amount(raw: str) -> Decimal:
    """Parse ``raw`` into a finite Decimal rounded to cents.

    Raises ValueError when ``raw`` is not a finite decimal number.
    """
    try:
        value = Decimal(raw.strip())
    except (InvalidOperation, AttributeError) as exc:
        raise ValueError(f"not a decimal number: {raw!r}") from exc
    if not value.is_finite():
        raise ValueError(f"not a finite amount: {raw!r}")
    try:
        return value.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        # more digits than the decimal context can hold
        raise ValueError(f"amount out of range: {raw!r}") from exc


def format_amount(value: Decimal) -> str:
    return f"{value.quantize(CENT, rounding=ROUND_HALF_UP):.2f}"
