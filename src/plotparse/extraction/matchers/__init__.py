"""Lexical matchers for society and phase/block resolution."""

from .aliases import AliasMatch, match_aliases, normalize_alias_table
from .societies import (
    SocietyDefinition,
    SocietyMatch,
    SocietyMatcher,
    find_society,
    get_society_matcher,
    parse_society_dictionary,
)

__all__ = [
    "AliasMatch",
    "SocietyDefinition",
    "SocietyMatch",
    "SocietyMatcher",
    "find_society",
    "get_society_matcher",
    "match_aliases",
    "normalize_alias_table",
    "parse_society_dictionary",
]
