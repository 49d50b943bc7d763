"""Lenient numeric parsing for header values."""

from __future__ import annotations

import math
import re

# Leading decimal literal, mirroring how browsers' ``parseFloat`` reads
# header values: "100abc" -> 100, "1.5e3s" -> 1500, "abc" -> nothing.
# ASCII digits only.
_LEADING_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _whole(number: float) -> int | float:
    return int(number) if number.is_integer() else number


def parse_number(value: object) -> int | float | None:
    """Return *value* as a finite number, or ``None`` when it isn't one.

    Whole results come back as ``int`` so they render as ``100`` rather than
    ``100.0``. Trailing garbage after a numeric prefix is ignored.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        return _whole(value) if math.isfinite(value) else None

    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    match = _LEADING_NUMBER.match(text)
    if match is None:
        return None

    number = float(match.group())
    if not math.isfinite(number):
        return None
    return _whole(number)
