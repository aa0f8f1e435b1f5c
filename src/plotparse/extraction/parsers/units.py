"""Canonicalise the area and currency units used in Pakistani listings."""
from __future__ import annotations

import re
from typing import Optional

__all__ = ["currency_multiplier", "normalize_size_unit"]

_CANONICAL_SIZE_UNITS = {
    "Kanal": {"kanal", "k"},
    "Marla": {"marla", "m"},
    "SqFt": {"sqft", "feet"},
    "SqYd": {"sqyd", "sqyard", "yard", "yards", "yds", "yd", "gaz"},
}

_CURRENCY_MULTIPLIERS = {
    "crore": 10_000_000,
    "cr": 10_000_000,
    "cr.": 10_000_000,
    "lac": 100_000,
    "lacs": 100_000,
    "lakh": 100_000,
    "lakhs": 100_000,
    "k": 1_000,
    "m": 1_000_000,
    "million": 1_000_000,
}


def _sanitize(token: str) -> str:
    return re.sub(r"\s+", "", token).lower()


def normalize_size_unit(token: Optional[str]) -> Optional[str]:
    """Return the canonical area label (``Kanal``, ``Marla``, ``SqFt``, ``SqYd``)."""

    if token is None:
        return None
    cleaned = _sanitize(token)
    for canonical, aliases in _CANONICAL_SIZE_UNITS.items():
        if cleaned in aliases:
            return canonical
    return None


def currency_multiplier(token: Optional[str]) -> Optional[int]:
    """Return the rupee multiplier for a crore/lakh/thousand/million token."""

    if not token:
        return None
    return _CURRENCY_MULTIPLIERS.get(_sanitize(token))
