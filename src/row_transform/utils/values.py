"""Scalar value helpers shared by transformation handlers."""

from __future__ import annotations

import math
from typing import Any


def is_blank(value: Any) -> bool:
    """
    Return True for values treated as empty by handlers.

    Covers None, empty strings, zero, False and NaN.
    """
    if isinstance(value, float) and math.isnan(value):
        return True
    return not value


def to_text(value: Any) -> str:
    """
    Coerce a scalar row value to text.

    Examples:
        >>> to_text(None)
        ''
        >>> to_text(12.0)
        '12'
        >>> to_text(True)
        'true'
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


__all__ = ["is_blank", "to_text"]
