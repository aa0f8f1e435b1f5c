"""Output record produced for every parsed message."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

__all__ = ["ListingFlags", "ParsedRecord"]


@dataclass(frozen=True)
class ListingFlags:
    corner: bool = False
    park: bool = False
    possession: bool = False

    def as_dict(self) -> Dict[str, bool]:
        return {"corner": self.corner, "park": self.park, "possession": self.possession}


@dataclass(frozen=True)
class ParsedRecord:
    """Structured listing extracted from one message.

    String fields default to ``""``; ``size_value`` and ``demand_amount`` are
    ``None`` when absent, never ``0``.
    """

    society: str = ""
    phase_block: str = ""
    plot_number: str = ""
    size_value: Optional[float | int] = None
    size_unit: str = ""
    demand_amount: Optional[int] = None
    demand_text: str = ""
    phone_e164: str = ""
    notes: str = ""
    flags: ListingFlags = field(default_factory=ListingFlags)
    dimensions_text: str = ""

    def as_dict(self) -> Dict[str, Any]:
        """Expose the record as a JSON-ready mapping."""

        return {
            "society": self.society,
            "phase_block": self.phase_block,
            "plot_number": self.plot_number,
            "size_value": self.size_value,
            "size_unit": self.size_unit,
            "demand_amount": self.demand_amount,
            "demand_text": self.demand_text,
            "phone_e164": self.phone_e164,
            "notes": self.notes,
            "flags": self.flags.as_dict(),
            "dimensions_text": self.dimensions_text,
        }

    def to_listing_payload(self) -> Dict[str, Any]:
        """Field layout accepted by the listing store; empty strings become ``None``."""

        def _or_none(value: str) -> Optional[str]:
            return value or None

        return {
            "society_name": _or_none(self.society),
            "phase_block": _or_none(self.phase_block),
            "plot_size_value": self.size_value,
            "plot_size_unit": _or_none(self.size_unit),
            "plot_number": _or_none(self.plot_number),
            "demand_amount_pkr": self.demand_amount,
            "phone": _or_none(self.phone_e164),
            "notes": _or_none(self.notes),
            "attributes": {
                "flags": self.flags.as_dict(),
                "dimensions": _or_none(self.dimensions_text),
                "demand_text": _or_none(self.demand_text),
            },
        }
