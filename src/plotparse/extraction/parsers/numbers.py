"""Utilities to parse the numerals found in classified listings."""
from __future__ import annotations

import re
from typing import Optional

__all__ = ["compact_number", "count_digits", "parse_amount"]

_STRIP_PATTERN = re.compile(r"[^0-9,.]+")


def parse_amount(raw: str) -> float:
    """Parse a grouped or decimal numeral (``1,500,000``, ``1.5``, ``85``).

    Commas are always thousands separators. A single period is a decimal
    point; repeated periods (``1.500.000``) are treated as grouping.
    """

    candidate = _STRIP_PATTERN.sub("", raw or "")
    if not any(ch.isdigit() for ch in candidate):
        raise ValueError(f"Cannot parse numeric value from '{raw}'")
    candidate = candidate.replace(",", "")
    if candidate.count(".") > 1:
        candidate = candidate.replace(".", "")
    candidate = candidate.strip(".")
    try:
        return float(candidate)
    except ValueError as exc:
        raise ValueError(f"Invalid numeric value: {raw!r}") from exc


def count_digits(raw: str) -> int:
    """Return the number of digit characters in ``raw``."""

    return sum(1 for ch in raw if ch.isdigit())


def compact_number(value: Optional[float]) -> Optional[float | int]:
    """Return ``value`` as an ``int`` when it has no fractional part."""

    if value is None:
        return None
    if float(value).is_integer():
        return int(value)
    return value
