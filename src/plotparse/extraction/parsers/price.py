"""Demand/price resolution over competing numeric interpretations.

Every numeral outside a phone number is a potential price. Ungrouped numerals
are at most four digits long, so only comma or period grouped figures reach
the literal rupee band. Candidates are converted to rupees (explicit
crore/lakh/thousand/million units, or contextual bands for bare numbers),
scored by unit presence and proximity to the words "demand" and "price", and
the best one wins.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from ..patterns import PATTERNS
from .numbers import count_digits, parse_amount
from .phone import scan_phones
from .units import currency_multiplier
from .zones import ExclusionZones

__all__ = [
    "PriceCandidate",
    "PriceMatch",
    "iter_price_candidates",
    "parse_price",
    "price_mention_spans",
]

LOGGER = logging.getLogger(__name__)

_PLOT_PROXIMITY = 8
_DISTANCE_SCALE = 50.0
_LAKH_WORDS = re.compile(r"lac|lakh", re.IGNORECASE)


@dataclass(frozen=True)
class PriceCandidate:
    """A numeral converted to rupees together with its ranking score."""

    amount: int
    raw: str
    position: int
    score: float
    unit: str = ""


@dataclass(frozen=True)
class PriceMatch:
    """Selected demand; ``amount`` is ``None`` when nothing qualified."""

    amount: Optional[int] = None
    text: str = ""


def _occurrences(lowered: str, word: str) -> List[int]:
    positions: List[int] = []
    start = lowered.find(word)
    while start != -1:
        positions.append(start)
        start = lowered.find(word, start + 1)
    return positions


def _nearest_distance(position: int, anchors: Sequence[int]) -> Optional[int]:
    if not anchors:
        return None
    return min(abs(position - anchor) for anchor in anchors)


def _plot_windows(text: str) -> List[Tuple[int, int]]:
    return [match.span() for match in PATTERNS.plot_mention.finditer(text)]


def _near_plot(position: int, windows: Sequence[Tuple[int, int]]) -> bool:
    for start, end in windows:
        if start <= position <= end or 0 < position - end <= _PLOT_PROXIMITY:
            return True
    return False


def price_mention_spans(text: str) -> Iterator[Tuple[int, int]]:
    """Yield spans of price-pattern matches carrying a unit or a demand/price prefix."""

    for match in PATTERNS.price.finditer(text):
        if match.group("unit") or match.group("prefix"):
            yield match.span()


def _to_rupees(value: float, unit: str, lowered: str) -> Optional[float]:
    multiplier = currency_multiplier(unit)
    if multiplier is not None:
        return value * multiplier
    if value >= 1_000_000:
        return value
    if 0.8 <= value <= 10 and "cr" in lowered:
        return value * 10_000_000
    if 10 <= value <= 500 and _LAKH_WORDS.search(lowered):
        return value * 100_000
    if 80 <= value <= 500 and ("demand" in lowered or "asking" in lowered):
        return value * 100_000
    return None


def iter_price_candidates(text: str) -> Iterator[PriceCandidate]:
    """Yield every scored price candidate found in ``text``."""

    lowered = text.lower()
    demand_positions = _occurrences(lowered, "demand")
    price_positions = _occurrences(lowered, "price")
    plot_windows = _plot_windows(text)
    phones = ExclusionZones.from_spans(phone.span for phone in scan_phones(text))

    for match in PATTERNS.price.finditer(text):
        raw_number = match.group("number")
        position = match.start("number")
        if phones.overlaps(position, match.end("number")):
            continue
        if _near_plot(position, plot_windows):
            continue
        try:
            value = parse_amount(raw_number)
        except ValueError:
            continue
        unit = (match.group("unit") or "").lower()
        rupees = _to_rupees(value, unit, lowered)
        if not rupees:
            continue

        score = 3.0 if unit else 0.0
        demand_distance = _nearest_distance(position, demand_positions)
        if demand_distance is not None:
            score += max(0.0, 2.0 - demand_distance / _DISTANCE_SCALE)
        price_distance = _nearest_distance(position, price_positions)
        if price_distance is not None:
            score += max(0.0, 1.0 - price_distance / _DISTANCE_SCALE)
        if not unit and count_digits(raw_number) >= 4:
            score -= 0.5

        yield PriceCandidate(
            amount=int(round(rupees)),
            raw=text[position : match.end()].strip(),
            position=position,
            score=score,
            unit=unit,
        )


def parse_price(text: str) -> PriceMatch:
    """Return the highest scoring demand; ties go to the larger amount."""

    candidates = sorted(
        iter_price_candidates(text),
        key=lambda candidate: (-candidate.score, -candidate.amount),
    )
    if not candidates:
        return PriceMatch()
    best = candidates[0]
    LOGGER.debug("price resolved to %s from %d candidates", best.amount, len(candidates))
    return PriceMatch(amount=best.amount, text=best.raw)
