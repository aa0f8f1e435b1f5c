"""Pakistani mobile number detection and E.164 normalisation."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from ..patterns import PATTERNS

__all__ = ["PhoneMatch", "extract_phone", "normalize_phone", "scan_phones"]

_NON_DIGITS = re.compile(r"\D")


@dataclass(frozen=True)
class PhoneMatch:
    """Mobile number located in text."""

    e164: str
    raw: str
    span: Tuple[int, int]


def normalize_phone(raw: Optional[str]) -> str:
    """Return ``raw`` in ``+92...`` form; empty input yields ``""``."""

    digits = _NON_DIGITS.sub("", raw or "")
    if not digits:
        return ""
    if digits.startswith("92"):
        return "+" + digits
    if digits.startswith("0"):
        return "+92" + digits[1:]
    if digits.startswith("3") and len(digits) == 10:
        return "+92" + digits
    return "+" + digits


def scan_phones(text: str) -> Iterable[PhoneMatch]:
    for match in PATTERNS.phone.finditer(text):
        yield PhoneMatch(e164=normalize_phone(match.group(0)), raw=match.group(0), span=match.span())


def extract_phone(text: str) -> str:
    """Return the first mobile number in ``text`` normalised to E.164."""

    for match in scan_phones(text):
        return match.e164
    return ""
