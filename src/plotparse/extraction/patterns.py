"""Compiled pattern library shared by every listing parser.

All patterns are compiled once at import time and never mutated, so the
module-level :data:`PATTERNS` instance can be read from any number of threads.
Patterns avoid nested quantifiers; callers cap the input length before
matching.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

__all__ = [
    "BLOCK_STOPWORDS",
    "DIMENSION_AREAS",
    "FLAG_RULES",
    "NAMED_BLOCKS",
    "PATTERNS",
    "PatternLibrary",
]

_FLAGS = re.IGNORECASE

NAMED_BLOCKS: frozenset[str] = frozenset({"executive", "overseas", "safari", "hills", "extension", "ext"})

# Listing vocabulary that never names a block ("F Block Plot 12", "block size").
BLOCK_STOPWORDS: Tuple[str, ...] = (
    "size",
    "plots",
    "plot",
    "no",
    "for",
    "sale",
    "demand",
    "price",
    "asking",
    "corner",
    "park",
    "facing",
    "possession",
    "marla",
    "kanal",
    "phase",
    "available",
)

_STOP = "|".join(BLOCK_STOPWORDS)
_TOKEN = r"[a-z0-9]+(?:-[a-z0-9]+)*"
_PLOT_DIGITS = r"\d{1,6}(?:[a-z](?![a-z\d]))?"

# Keyed by "<width>x<height>"; value is (area, unit).
DIMENSION_AREAS: Mapping[str, Tuple[int, str]] = MappingProxyType(
    {
        "25x50": (5, "Marla"),
        "30x60": (7, "Marla"),
        "35x70": (10, "Marla"),
        "50x90": (20, "Marla"),
        "100x90": (40, "Marla"),
    }
)


@dataclass(frozen=True)
class PatternLibrary:
    """Immutable bundle of the regular expressions used by the extractor."""

    phone: re.Pattern[str]
    price: re.Pattern[str]
    plot_mention: re.Pattern[str]
    plot_series: re.Pattern[str]
    plot_word: re.Pattern[str]
    plot_hash: re.Pattern[str]
    street: re.Pattern[str]
    bare_number: re.Pattern[str]
    bare_context: re.Pattern[str]
    dimension: re.Pattern[str]
    size_short: re.Pattern[str]
    size_word: re.Pattern[str]
    block_after: re.Pattern[str]
    block_before: re.Pattern[str]
    phase_after: re.Pattern[str]
    phase_before: re.Pattern[str]
    corner: re.Pattern[str]
    park: re.Pattern[str]
    possession: re.Pattern[str]


PATTERNS = PatternLibrary(
    phone=re.compile(r"(?<![\d+])(?:\+?92[\s-]?|0)?3\d{2}[\s-]?\d{7}(?!\d)"),
    price=re.compile(
        r"""
        (?:(?P<prefix>demand|price|asking)\s*[:=]?\s*)?
        (?<![\d.,])
        (?P<number>\d{1,3}(?:[,.]\d{3})+(?:\.\d+)?|\d{1,4}(?:\.\d{1,2})?)
        (?!\d)
        (?:\s*(?P<unit>crore|cr\.?|lakhs?|lacs?|million|k|m)(?![a-z]))?
        """,
        _FLAGS | re.VERBOSE,
    ),
    plot_mention=re.compile(r"\bplot\s*(?:#|no\.?|num)?\s*\d{1,6}", _FLAGS),
    plot_series=re.compile(r"\b(?P<number>\d{2,4})\s*-?\s*series\b", _FLAGS),
    plot_word=re.compile(
        rf"\bplot\s*(?:#|no\.?|num(?:ber)?\.?)?\s*(?P<number>{_PLOT_DIGITS})(?!\d)",
        _FLAGS,
    ),
    plot_hash=re.compile(rf"(?:^|(?<=\s))#\s*(?P<number>{_PLOT_DIGITS})\b", _FLAGS | re.MULTILINE),
    street=re.compile(r"\b(?:street|st)\.?\s*\d{1,4}", _FLAGS),
    bare_number=re.compile(r"\b(?P<number>\d{2,4})\b"),
    bare_context=re.compile(r"\b(?:marla|kanal|sq|yard|yds?|feet|ft|street|st|series)\b", _FLAGS),
    dimension=re.compile(
        r"(?<!\d)(?P<width>\d{2,3})\s*(?P<sep>[x×*/])\s*(?P<height>\d{2,3})(?!\d)",
        _FLAGS,
    ),
    size_short=re.compile(r"\b(?P<value>\d{1,2})\s*(?P<unit>[mk])\b", _FLAGS),
    size_word=re.compile(
        r"\b(?P<value>\d{1,3}(?:\.\d{1,2})?)\s*(?P<unit>kanal|marla|sq\s?ft|sq\s?yd|gaz|yards?|yds?|feet)",
        _FLAGS,
    ),
    block_after=re.compile(
        rf"\b(?:block|blk)\b[\s:#-]*(?!(?:{_STOP})\b)(?P<token>{_TOKEN})\b",
        _FLAGS,
    ),
    block_before=re.compile(
        rf"(?<![a-z0-9-])(?!(?:{_STOP})\b)(?P<token>{_TOKEN})\s*(?:block|blk)\b",
        _FLAGS,
    ),
    phase_after=re.compile(r"\bphase[\s:#-]*(?P<number>\d+|[ivx]+)\b", _FLAGS),
    phase_before=re.compile(r"\b(?P<number>\d+|[ivx]+)[\s-]*phase\b", _FLAGS),
    corner=re.compile(r"\bcorner\b", _FLAGS),
    park=re.compile(r"park[-\s]?facing", _FLAGS),
    possession=re.compile(r"\bpossession\b", _FLAGS),
)

# Ordered keyword table; labels are reported in this order, not text order.
FLAG_RULES: Tuple[Tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\bndc\s*(?:open|clear|available)\b", _FLAGS), "NDC open"),
    (PATTERNS.possession, "Possession"),
    (re.compile(r"\b(?:sun\s*fac(?:e|ed|ing)|south\s*open)\b", _FLAGS), "Sun face"),
    (PATTERNS.corner, "Corner"),
    (re.compile(r"\bpark[-\s]?facing\b", _FLAGS), "Park facing"),
    (re.compile(r"\bboulevard\b", _FLAGS), "Boulevard"),
    (re.compile(r"\bnear\s+(?:commercial|markaz)\b|\bback\s+open\b", _FLAGS), "Near commercial/markaz/back open"),
)
