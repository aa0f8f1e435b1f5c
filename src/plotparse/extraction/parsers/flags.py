"""Listing notes and boolean flags (corner, park facing, possession)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..patterns import FLAG_RULES, PATTERNS

__all__ = ["FlagMatch", "build_notes", "detect_flags", "extract_note_labels"]


@dataclass(frozen=True)
class FlagMatch:
    corner: bool = False
    park: bool = False
    possession: bool = False


def extract_note_labels(text: str) -> List[str]:
    """Return matched labels in keyword-table order, without duplicates."""

    labels: List[str] = []
    for pattern, label in FLAG_RULES:
        if label not in labels and pattern.search(text):
            labels.append(label)
    return labels


def build_notes(text: str, dimensions: Optional[str] = None) -> str:
    labels = extract_note_labels(text)
    if dimensions:
        note = f"Dimensions {dimensions}"
        if note not in labels:
            labels.append(note)
    return ", ".join(labels)


def detect_flags(text: str) -> FlagMatch:
    # Matched directly rather than derived from the notes labels.
    lowered = text.lower()
    return FlagMatch(
        corner=bool(PATTERNS.corner.search(lowered)),
        park=bool(PATTERNS.park.search(lowered)),
        possession=bool(PATTERNS.possession.search(lowered)),
    )
