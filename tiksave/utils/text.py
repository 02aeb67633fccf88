"""
TikSave - Text Utilities
========================

Display formatting shared by the preview and the logs.

Author: حَـــــنَّـــــا
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional


def _as_number(value: Any) -> Optional[Decimal]:
    """Coerce a loosely-typed numeric field, or None if unusable."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not number.is_finite() or number <= 0:
        return None
    return number


def format_duration(seconds: Any) -> str:
    """
    Format seconds as minutes:seconds.

    Missing, zero or invalid values render as "0:00".

    Examples:
        format_duration(75) -> "1:15"
        format_duration(3600) -> "60:00"
    """
    number = _as_number(seconds)
    if number is None:
        return "0:00"
    total = int(number)  # floor, number is positive
    mins, secs = divmod(total, 60)
    return f"{mins}:{secs:02d}"


def _one_decimal(value: Decimal) -> Decimal:
    return value.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def format_number(num: Any) -> str:
    """
    Format a count compactly.

    >= 1,000,000 -> "X.YM", >= 1,000 -> "X.YK" (one decimal, half-up),
    otherwise the integer as-is. Missing or invalid values render as "0".
    """
    number = _as_number(num)
    if number is None:
        return "0"
    if number < 1_000:
        return str(int(number))

    # Round first, 999,950 becomes 1.0M rather than 1000.0K
    thousands = _one_decimal(number / 1_000)
    if thousands < 1_000:
        return f"{thousands}K"
    return f"{_one_decimal(number / 1_000_000)}M"


def truncate(text: str, limit: int = 60) -> str:
    """Shorten text for log output."""
    return text[:limit] + "..." if len(text) > limit else text
