"""Helpers for integer (satoshi) amounts."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

SATOSHI_DECIMALS = 8
_SATOSHI = Decimal(10) ** SATOSHI_DECIMALS


def parse_amount(value: Any) -> int:
    """Return a non-negative integer amount from an API value (int or numeric string).

    Anything that is not a whole non-negative number yields 0.
    """
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        return value if value >= 0 else 0
    try:
        d = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return 0
    if not d.is_finite() or d < 0 or d != d.to_integral_value():
        return 0
    return int(d)


def format_satoshi(amount: int, symbol: str | None = None) -> str:
    """Format an integer amount as a decimal coin value, e.g. 150000000 -> '1.5'."""
    value = (Decimal(amount) / _SATOSHI).normalize()
    text = format(value, "f")
    return f"{text} {symbol}" if symbol else text
