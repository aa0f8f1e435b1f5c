"""Rule-based extraction of property listings from classified messages.

:func:`parse_message` is the entry point; the parsers and matchers it
composes are importable on their own for targeted use and testing.
"""

from .lexicon import (
    SocietyEntry,
    load_alias_table,
    load_options,
    load_society_dictionary,
    render_society_dictionary,
)
from .matchers import AliasMatch, SocietyMatch, SocietyMatcher, match_aliases, parse_society_dictionary
from .options import ParseOptions
from .orchestrator import Orchestrator, parse_message
from .parsers.phone import normalize_phone
from .parsers.phase_block import format_block
from .patterns import DIMENSION_AREAS, PATTERNS, PatternLibrary
from .record import ListingFlags, ParsedRecord
from .resources import DEFAULT_ALIAS_TABLE, DEFAULT_SOCIETY_DICTIONARY

__all__ = [
    "AliasMatch",
    "DEFAULT_ALIAS_TABLE",
    "DEFAULT_SOCIETY_DICTIONARY",
    "DIMENSION_AREAS",
    "ListingFlags",
    "Orchestrator",
    "PATTERNS",
    "ParseOptions",
    "ParsedRecord",
    "PatternLibrary",
    "SocietyEntry",
    "SocietyMatch",
    "SocietyMatcher",
    "format_block",
    "load_alias_table",
    "load_options",
    "load_society_dictionary",
    "match_aliases",
    "normalize_phone",
    "parse_message",
    "parse_society_dictionary",
    "render_society_dictionary",
]
