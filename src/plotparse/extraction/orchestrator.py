"""Compose the listing parsers and matchers into one :class:`ParsedRecord`."""
from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

from .matchers.aliases import match_aliases
from .matchers.societies import get_society_matcher
from .options import ParseOptions
from .parsers.flags import build_notes, detect_flags
from .parsers.phase_block import label_block, parse_phase_block
from .parsers.phone import extract_phone
from .parsers.plot import parse_plot_number
from .parsers.price import parse_price
from .parsers.size import parse_size
from .record import ListingFlags, ParsedRecord

LOGGER = logging.getLogger(__name__)

__all__ = ["Orchestrator", "parse_message"]

_DEFAULT_OPTIONS = ParseOptions()


class Orchestrator:
    """Run society/block resolution and the field parsers over one message."""

    def __init__(self, cfg: Optional[ParseOptions] = None) -> None:
        self._cfg = cfg or _DEFAULT_OPTIONS
        self._societies = get_society_matcher(self._cfg.society_dictionary)

    @property
    def config(self) -> ParseOptions:
        return self._cfg

    def _prepare(self, text: Any) -> str:
        if text is None:
            return ""
        if not isinstance(text, str):
            text = str(text)
        if len(text) > self._cfg.max_input_chars:
            LOGGER.debug("truncating message from %d to %d chars", len(text), self._cfg.max_input_chars)
            text = text[: self._cfg.max_input_chars]
        return text

    def resolve_society(self, text: str) -> Tuple[str, str]:
        """Dictionary first, then the alias table, then the block/phase heuristic."""

        hit = self._societies.find(text)
        society = hit.society
        phase_block = label_block(hit.block, self._cfg.block_output_style) if hit.block else ""

        if not society:
            alias_hit = match_aliases(text, self._cfg.resolved_alias_table)
            society = alias_hit.society
            if not phase_block:
                phase_block = alias_hit.phase_block

        if not phase_block:
            phase_block = parse_phase_block(text)
        return society, phase_block

    def parse(self, text: Any) -> ParsedRecord:
        message = self._prepare(text)
        if not message.strip():
            return ParsedRecord()

        society, phase_block = self.resolve_society(message)
        plot_number = parse_plot_number(message)
        price = parse_price(message)
        size = parse_size(message)
        phone = extract_phone(message)
        flags = detect_flags(message)

        record = ParsedRecord(
            society=society,
            phase_block=phase_block,
            plot_number=plot_number,
            size_value=size.value,
            size_unit=size.unit,
            demand_amount=price.amount,
            demand_text=price.text,
            phone_e164=phone,
            notes=build_notes(message, size.dimensions),
            flags=ListingFlags(corner=flags.corner, park=flags.park, possession=flags.possession),
            dimensions_text=size.dimensions,
        )
        LOGGER.debug(
            "parsed message: society=%r phase_block=%r plot=%r demand=%r",
            record.society,
            record.phase_block,
            record.plot_number,
            record.demand_amount,
        )
        return record


def parse_message(text: Any, options: Optional[ParseOptions] = None) -> ParsedRecord:
    """Extract a :class:`ParsedRecord` from a free-form listing message."""

    return Orchestrator(options).parse(text)
