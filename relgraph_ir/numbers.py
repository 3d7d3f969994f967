from __future__ import annotations

import math


def format_number(value: float, digits: int = 4) -> str:
    """Compact fixed-point text for markup attributes (``12.5``, ``0``, ``-3.25``)."""

    value = float(value)
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite number for vector output")
    formatted = f"{value:.{digits}f}".rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted
