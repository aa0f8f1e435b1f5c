"""Heuristic detection of block and phase mentions."""
from __future__ import annotations

import re
from typing import Callable, Literal, Optional, Sequence

from ..patterns import NAMED_BLOCKS, PATTERNS

__all__ = [
    "BlockOutputStyle",
    "format_block",
    "label_block",
    "parse_block_after",
    "parse_block_before",
    "parse_phase",
    "parse_phase_block",
    "roman_to_int",
]

BlockOutputStyle = Literal["title", "letter"]

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_ROMAN_PATTERN = re.compile(r"^[IVXLCDM]+$")


def _capitalize(token: str) -> str:
    return token[:1].upper() + token[1:]


def format_block(letter: str, style: BlockOutputStyle = "title") -> str:
    """``"f"`` → ``"Block F"`` (title) or ``"F block"`` (letter)."""

    upper = (letter or "").strip().upper()
    if not upper:
        return ""
    return f"{upper} block" if style == "letter" else f"Block {upper}"


def label_block(block_or_name: str, style: BlockOutputStyle = "title") -> str:
    """Label a dictionary-captured block: letters are formatted, names capitalised."""

    value = (block_or_name or "").strip()
    if not value:
        return ""
    if len(value) == 1 and value.isalpha():
        return format_block(value, style)
    return value[:1].upper() + value[1:].lower()


def roman_to_int(numeral: str) -> Optional[int]:
    """Additive/subtractive roman numeral parsing (``VII`` → 7, ``IX`` → 9)."""

    upper = (numeral or "").upper()
    if not _ROMAN_PATTERN.match(upper):
        return None
    total = 0
    for index, char in enumerate(upper):
        value = _ROMAN_VALUES[char]
        following = _ROMAN_VALUES.get(upper[index + 1]) if index + 1 < len(upper) else 0
        total += -value if value < following else value
    return total


def _classify_token(token: str) -> Optional[str]:
    token = token.strip().lower()
    if not token:
        return None
    if len(token) == 1 and token.isalpha():
        return f"Block {token.upper()}"
    if token in NAMED_BLOCKS:
        return _capitalize(token)
    return f"{_capitalize(token)} Block"


def parse_block_after(text: str) -> Optional[str]:
    """Token to the right of "block"/"blk" (``Block F``, ``blk executive``)."""

    match = PATTERNS.block_after.search(text)
    return _classify_token(match.group("token")) if match else None


def parse_block_before(text: str) -> Optional[str]:
    """Token to the left of "block"/"blk" (``F Block``, ``Executive Block``)."""

    match = PATTERNS.block_before.search(text)
    return _classify_token(match.group("token")) if match else None


def parse_phase(text: str) -> Optional[str]:
    """``Phase 7``, ``phase-VII`` or ``7 phase`` → ``"Phase 7"``."""

    match = PATTERNS.phase_after.search(text) or PATTERNS.phase_before.search(text)
    if match is None:
        return None
    raw = match.group("number")
    if raw.isdigit():
        return f"Phase {int(raw)}"
    number = roman_to_int(raw)
    return f"Phase {number if number is not None else raw.upper()}"


_STRATEGIES: Sequence[Callable[[str], Optional[str]]] = (
    parse_block_after,
    parse_block_before,
    parse_phase,
)


def parse_phase_block(text: str) -> str:
    """Return the first block/phase found by the heuristic cascade, else ``""``."""

    for strategy in _STRATEGIES:
        result = strategy(text)
        if result:
            return result
    return ""
