"""Value formatting for text output."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any

SATOSHIS_PER_BTC = 100_000_000
MISSING = "N/A"


def satoshis_to_btc(value: Any, grouped: bool = False) -> str:
    """Format an integer amount of satoshis as BTC, exactly.

    >>> satoshis_to_btc(150000000)
    '1.5'
    >>> satoshis_to_btc(25000000000000000, grouped=True)
    '250,000,000'
    """
    if value is None or isinstance(value, bool):
        return MISSING
    try:
        btc = Decimal(str(value)) / SATOSHIS_PER_BTC
    except (TypeError, ValueError, InvalidOperation):
        return MISSING
    if not btc.is_finite():
        return MISSING
    return trim_decimal(f"{btc:,.8f}" if grouped else f"{btc:.8f}")


def trim_decimal(text: str) -> str:
    """Drop trailing zeros (and a dangling point) from a decimal string."""
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def format_timestamp(value: Any) -> str:
    """Format Unix seconds as UTC ISO-8601 with milliseconds.

    >>> format_timestamp(0)
    '1970-01-01T00:00:00.000Z'
    """
    if value is None or isinstance(value, bool):
        return MISSING
    try:
        dt = datetime.fromtimestamp(float(value), tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError):
        return MISSING
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_number(value: Any) -> str:
    """Thousands separators, at most three decimals."""
    if value is None or isinstance(value, bool):
        return MISSING
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        return trim_decimal(f"{value:,.3f}")
    return str(value)


def format_value(value: Any) -> str:
    """Render a raw field, showing ``N/A`` for missing values."""
    return MISSING if value is None else str(value)


def format_btc(value: Any) -> str:
    """Format an amount that is already in BTC, up to eight decimals."""
    if value is None or isinstance(value, bool):
        return MISSING
    try:
        return trim_decimal(f"{float(value):.8f}")
    except (TypeError, ValueError):
        return str(value)
