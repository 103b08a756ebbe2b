"""Lenient value coercion for feature records.

The spatial backend serialises flags and measurements inconsistently
(booleans, ``"t"``/``"f"`` strings, numeric strings, nulls). Missing or
unreadable values coerce to values that can never satisfy a rule:
``False`` for flags and a caller-chosen sentinel for numbers.
"""

import math
from typing import Any

TRUE_STRINGS = frozenset({"true", "t", "yes", "y", "1"})
FALSE_STRINGS = frozenset({"false", "f", "no", "n", "0", ""})


def coerce_flag(value: Any) -> bool:
    """Coerce a proximity flag to bool; anything unrecognised is False."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, int):
        return value != 0
    if isinstance(value, float):
        return not math.isnan(value) and value != 0
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    return False


def is_flag_like(value: Any) -> bool:
    """Whether ``value`` is a recognisable flag (used to report malformed records)."""
    if value is None or isinstance(value, bool | int | float):
        return True
    if isinstance(value, str):
        token = value.strip().lower()
        return token in TRUE_STRINGS or token in FALSE_STRINGS
    return False


def coerce_number(value: Any, default: float) -> float:
    """Coerce a measurement to float, falling back to ``default``.

    Booleans are rejected (``True`` is not a distance) and NaN or infinite
    values map to the default.
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    if not math.isfinite(number):
        return default
    return number


def is_number_like(value: Any) -> bool:
    """Whether ``value`` is absent or parses as a finite float."""
    if value is None:
        return True
    if isinstance(value, bool):
        return False
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError, OverflowError):
        return False


def coerce_text(value: Any) -> str | None:
    """Coerce identifiers and labels to stripped strings; blanks become None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None
