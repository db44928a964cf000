from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

NOT_AVAILABLE = "N/A"

# Default display convention: "," groups thousands, at most 3 fraction digits.
_FRACTION_QUANTUM = Decimal("0.001")


def format_languages(languages: Any) -> str:
    """
    {"eng": "English", "fra": "French"} -> "English, French"

    Values are joined in the mapping's own order. Anything that is not a
    mapping, and an empty mapping, gives "N/A".
    """
    if not isinstance(languages, Mapping):
        return NOT_AVAILABLE

    names = ["" if v is None else str(v) for v in languages.values()]
    return ", ".join(names) if names else NOT_AVAILABLE


def _format_decimal(d: Decimal) -> str:
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, d.adjusted() + 5)
        rounded = d.quantize(_FRACTION_QUANTUM, rounding=ROUND_HALF_UP)
    text = f"{rounded:,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_number(value: Any) -> str:
    """
    Display formatting for population / area values.

    - 0 is a real value and renders as "0"
    - None, "", False and NaN render as "N/A"
    - ints are comma-grouped: 1234567 -> "1,234,567", -1234567 -> "-1,234,567"
    - non-integers are rounded half away from zero to 3 fraction digits with
      trailing zeros dropped: 1234.5678 -> "1,234.568", 2.50 -> "2.5"
    - a non-empty string passes through unchanged, so an already-flattened
      "N/A" stays "N/A"
    """
    if value is None or isinstance(value, bool):
        return NOT_AVAILABLE
    if isinstance(value, str):
        return value or NOT_AVAILABLE
    if isinstance(value, int):
        try:
            return f"{value:,}"
        except ValueError:
            # past sys.get_int_max_str_digits(); Decimal has no such limit
            return _format_decimal(Decimal(value))
    if isinstance(value, float):
        if math.isnan(value):
            return NOT_AVAILABLE
        if math.isinf(value):
            return "∞" if value > 0 else "-∞"
        return _format_decimal(Decimal(repr(value)))
    if isinstance(value, Decimal):
        if value.is_nan():
            return NOT_AVAILABLE
        if value.is_infinite():
            return "-∞" if value.is_signed() else "∞"
        return _format_decimal(value)
    return NOT_AVAILABLE
