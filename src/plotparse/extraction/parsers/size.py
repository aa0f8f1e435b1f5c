"""Plot size resolution: shorthand, dimensions and worded sizes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from ..patterns import DIMENSION_AREAS, PATTERNS
from .numbers import compact_number, parse_amount
from .units import normalize_size_unit

__all__ = [
    "SizeMatch",
    "dimension_key",
    "parse_size",
    "parse_size_dimension",
    "parse_size_shorthand",
    "parse_size_worded",
]


@dataclass(frozen=True)
class SizeMatch:
    """Resolved plot size.

    ``value`` is ``None`` when only an unrecognised ``W×H`` dimension was
    found; in that case ``unit`` and ``dimensions`` both hold the raw text.
    """

    value: Optional[float | int] = None
    unit: str = ""
    dimensions: str = ""


def dimension_key(width: str, height: str) -> str:
    return f"{int(width)}x{int(height)}"


def parse_size_shorthand(text: str) -> Optional[SizeMatch]:
    """``10m`` / ``1 k`` style shorthand."""

    match = PATTERNS.size_short.search(text)
    if match is None:
        return None
    unit = normalize_size_unit(match.group("unit")) or ""
    return SizeMatch(value=compact_number(parse_amount(match.group("value"))), unit=unit)


def parse_size_dimension(text: str) -> Optional[SizeMatch]:
    """``25x50`` style dimensions, mapped to an area when the pair is known."""

    match = PATTERNS.dimension.search(text)
    if match is None:
        return None
    raw = f"{match.group('width')}{match.group('sep')}{match.group('height')}"
    known = DIMENSION_AREAS.get(dimension_key(match.group("width"), match.group("height")))
    if known is not None:
        area, unit = known
        return SizeMatch(value=area, unit=unit, dimensions=raw)
    return SizeMatch(value=None, unit=raw, dimensions=raw)


def parse_size_worded(text: str) -> Optional[SizeMatch]:
    """``10 Marla`` / ``1 kanal`` / ``120 sq yd`` style sizes."""

    match = PATTERNS.size_word.search(text)
    if match is None:
        return None
    unit = normalize_size_unit(match.group("unit"))
    if unit is None:
        return None
    return SizeMatch(value=compact_number(parse_amount(match.group("value"))), unit=unit)


_STRATEGIES: Sequence[Callable[[str], Optional[SizeMatch]]] = (
    parse_size_shorthand,
    parse_size_dimension,
    parse_size_worded,
)


def parse_size(text: str) -> SizeMatch:
    """Run the size strategies in priority order; first hit wins."""

    for strategy in _STRATEGIES:
        result = strategy(text)
        if result is not None:
            return result
    return SizeMatch()
