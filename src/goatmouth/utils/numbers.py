"""Lenient numeric coercion for backend rows and form input."""

from __future__ import annotations

import math
from typing import Any


def to_float(value: Any) -> float | None:
    """Finite float from a number or numeric string; None otherwise. Booleans are not numbers here."""
    if value is None or isinstance(value, bool):
        return None
    try:
        num = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(num):
        return None
    return num
