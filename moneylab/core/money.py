"""Won amounts: rounding, clamping and display formatting."""

from __future__ import annotations

import math
from typing import Optional

EOK = 100_000_000  # 억
MAN = 10_000  # 만


def round_won(value: float) -> int:
    """Round half-up to a whole won (the rounding every emitted amount uses); non-finite values become 0."""
    if not math.isfinite(value):
        return 0
    return int(math.floor(value + 0.5))


def safe_amount(value: Optional[float]) -> float:
    """Clamp NaN, infinities, None and negatives to 0.0."""
    if value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return max(0.0, number)


def finite_or_zero(value: Optional[float]) -> float:
    """Like :func:`safe_amount` but keeps the sign, for rates that may be negative."""
    if value is None or not math.isfinite(value):
        return 0.0
    return float(value)


def format_number(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,}"


def format_currency(amount: float) -> str:
    """
    Render a won amount the way the calculators display it:

      >= 1억   -> "1.25억원" (two decimals)
      >= 1만   -> "1,234만원" (floored)
      else     -> "9,999원"
    """
    if amount >= EOK:
        return f"{amount / EOK:.2f}억원"
    if amount >= MAN:
        return f"{math.floor(amount / MAN):,}만원"
    return f"{format_number(amount)}원"


__all__ = ["EOK", "MAN", "round_won", "safe_amount", "finite_or_zero", "format_number", "format_currency"]
