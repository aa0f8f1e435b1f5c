"""Plot number extraction.

Strategies run in priority order: ``"123 series"``, ``plot # 123``, ``#123``
and finally a bare 2–4 digit token that is not already claimed by a phone
number, dimension, plot mention, price or street.
"""
from __future__ import annotations

import re
from typing import Callable, Iterable, Optional, Sequence, Tuple

from ..patterns import PATTERNS
from .phone import scan_phones
from .price import price_mention_spans
from .zones import ExclusionZones

__all__ = [
    "build_exclusion_zones",
    "parse_plot_bare",
    "parse_plot_hash",
    "parse_plot_number",
    "parse_plot_series",
    "parse_plot_word",
]

_CONTEXT_WINDOW = 8


def parse_plot_series(text: str) -> Optional[str]:
    match = PATTERNS.plot_series.search(text)
    if match is None:
        return None
    return f"{match.group('number')} series"


def parse_plot_word(text: str) -> Optional[str]:
    match = PATTERNS.plot_word.search(text)
    return match.group("number") if match else None


def parse_plot_hash(text: str) -> Optional[str]:
    match = PATTERNS.plot_hash.search(text)
    return match.group("number") if match else None


def _spans(pattern_matches: Iterable[re.Match[str]]) -> Iterable[Tuple[int, int]]:
    for match in pattern_matches:
        yield match.span()


def build_exclusion_zones(text: str) -> ExclusionZones:
    """Collect the spans a bare plot number must not overlap."""

    spans = [match.span for match in scan_phones(text)]
    spans.extend(_spans(PATTERNS.dimension.finditer(text)))
    spans.extend(_spans(PATTERNS.plot_word.finditer(text)))
    spans.extend(_spans(PATTERNS.plot_hash.finditer(text)))
    spans.extend(price_mention_spans(text))
    spans.extend(_spans(PATTERNS.street.finditer(text)))
    return ExclusionZones.from_spans(spans)


def parse_plot_bare(text: str, zones: Optional[ExclusionZones] = None) -> Optional[str]:
    """Return the first standalone 2–4 digit token outside every exclusion zone."""

    if zones is None:
        zones = build_exclusion_zones(text)
    for match in PATTERNS.bare_number.finditer(text):
        start, end = match.span()
        if zones.overlaps(start, end):
            continue
        context = text[max(0, start - _CONTEXT_WINDOW) : end + _CONTEXT_WINDOW]
        if PATTERNS.bare_context.search(context):
            continue
        return match.group("number")
    return None


_STRATEGIES: Sequence[Callable[[str], Optional[str]]] = (
    parse_plot_series,
    parse_plot_word,
    parse_plot_hash,
    parse_plot_bare,
)


def parse_plot_number(text: str) -> str:
    """Return the plot number, or ``""`` when no strategy matches."""

    for strategy in _STRATEGIES:
        result = strategy(text)
        if result:
            return result
    return ""
