"""Parser primitives for deterministic listing extraction."""

from .flags import FlagMatch, build_notes, detect_flags, extract_note_labels
from .numbers import compact_number, parse_amount
from .phase_block import format_block, label_block, parse_phase_block, roman_to_int
from .phone import PhoneMatch, extract_phone, normalize_phone, scan_phones
from .plot import build_exclusion_zones, parse_plot_number
from .price import PriceCandidate, PriceMatch, iter_price_candidates, parse_price
from .size import SizeMatch, parse_size
from .units import currency_multiplier, normalize_size_unit
from .zones import ExclusionZones

__all__ = [
    "ExclusionZones",
    "FlagMatch",
    "PhoneMatch",
    "PriceCandidate",
    "PriceMatch",
    "SizeMatch",
    "build_exclusion_zones",
    "build_notes",
    "compact_number",
    "currency_multiplier",
    "detect_flags",
    "extract_note_labels",
    "extract_phone",
    "format_block",
    "iter_price_candidates",
    "label_block",
    "normalize_phone",
    "normalize_size_unit",
    "parse_amount",
    "parse_phase_block",
    "parse_plot_number",
    "parse_price",
    "parse_size",
    "roman_to_int",
    "scan_phones",
]
