"""Half-open character ranges already claimed by higher-priority matches."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

__all__ = ["ExclusionZones"]

Span = Tuple[int, int]


@dataclass(frozen=True)
class ExclusionZones:
    """Immutable set of ``[start, end)`` intervals over a piece of text."""

    spans: Tuple[Span, ...] = ()

    @classmethod
    def from_spans(cls, spans: Iterable[Span]) -> "ExclusionZones":
        kept = sorted({(int(start), int(end)) for start, end in spans if end > start})
        return cls(spans=tuple(kept))

    def contains(self, position: int) -> bool:
        return any(start <= position < end for start, end in self.spans)

    def overlaps(self, start: int, end: int) -> bool:
        """Return ``True`` when ``[start, end)`` intersects any zone."""

        return any(start < zone_end and zone_start < end for zone_start, zone_end in self.spans)

    def __len__(self) -> int:
        return len(self.spans)
